import io

import pytest

from puzzlerack.another_game import light_merger, light_seeker, main


def both_agree(coin_piles):
    seeker = light_seeker(coin_piles)
    merger = light_merger(coin_piles)
    assert seeker == merger, f"approaches disagreed on {coin_piles}"
    return seeker


@pytest.mark.parametrize(
    ("coin_piles", "winner"),
    [
        ([1, 2, 3], "first"),
        ([2, 2], "second"),
        ([1, 3, 5, 7], "first"),
        ([2, 4, 6, 8], "second"),
        ([1], "first"),
        ([4], "second"),
        ([2, 4, 6, 7, 8], "first"),
        ([1000, 2000, 3000], "second"),
        ([999, 2000, 3000], "first"),
        ([2, 4, 6, 8, 10, 3], "first"),
    ],
)
def test_winner(coin_piles, winner):
    assert both_agree(coin_piles) == winner


def test_empty_piles_second_wins():
    assert both_agree([]) == "second"


def test_accepts_generator():
    assert light_seeker(pile * 2 for pile in range(1, 1001)) == "second"
    assert light_merger(pile * 2 for pile in range(1, 1001)) == "second"


def test_main_prints_each_winner(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n3\n1 2 3\n2\n2 2\n1\n7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "first\nsecond\nfirst\n"


def test_main_missing_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n2 2\n"))
    with pytest.raises(ValueError):
        main([])


def test_main_bad_number(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\n"))
    with pytest.raises(ValueError):
        main([])