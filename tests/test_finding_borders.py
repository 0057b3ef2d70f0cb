import io

import pytest

from puzzlerack.finding_borders import main, ribbon_checker, ribbon_tracer


def both_agree(word):
    letters = word.encode("ascii")
    kmp = ribbon_tracer(letters)
    naive = ribbon_checker(letters)
    assert kmp == naive, f"approaches disagreed on {word!r}"
    return kmp


@pytest.mark.parametrize(
    ("word", "borders"),
    [
        ("abcababcab", [2, 5]),
        ("aabaa", [1, 2]),
        ("abc", []),
        ("aaaa", [1, 2, 3]),
        ("a", []),
        ("aa", [1]),
        ("ab", []),
        ("abababab", [2, 4, 6]),
        ("abcda", [1]),
        ("aaaaaa", [1, 2, 3, 4, 5]),
    ],
)
def test_borders(word, borders):
    assert both_agree(word) == borders


def test_empty_word_has_no_borders():
    assert ribbon_tracer(b"") == []
    assert ribbon_checker(b"") == []


def test_works_on_str():
    assert ribbon_tracer("abcababcab") == [2, 5]
    assert ribbon_checker("abcababcab") == [2, 5]


def test_long_uniform_word():
    word = b"a" * 1000
    assert ribbon_tracer(word) == list(range(1, 1000))
    assert ribbon_checker(word) == list(range(1, 1000))


def test_main_official_example(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abcababcab\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2 5\n"


def test_main_no_borders_prints_blank_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_missing_word(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(ValueError):
        main([])