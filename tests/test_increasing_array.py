import io

import pytest

from puzzlerack.increasing_array import lift_blocks, main


@pytest.mark.parametrize(
    "blocks, expected",
    [
        ([3, 2, 5, 1, 7], 5),
        ([1, 2, 3, 4, 5], 0),
        ([5, 5, 5, 5], 0),
        ([5, 4, 3, 2, 1], 10),
        ([42], 0),
        ([10, 3], 7),
        ([3, 9], 0),
        ([1, 1, 100, 2, 2], 196),
        ([0, 0, 0, 0], 0),
        ([1, 2, 3, 4, 1], 3),
    ],
)
def test_lift_blocks(blocks, expected):
    assert lift_blocks(blocks) == expected


def test_empty_array():
    assert lift_blocks([]) == 0


def test_accepts_generator():
    assert lift_blocks(n for n in (5, 4, 3, 2, 1)) == 10


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 2 5 1 7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "5\n"


def test_main_missing_line(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    with pytest.raises(ValueError):
        main([])