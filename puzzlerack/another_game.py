"""Decide the winner of the coin-pile game.

Two players alternate turns. A turn removes one coin from one pile or from
two piles, and a player who cannot move loses. The first player wins exactly
when at least one pile holds an odd number of coins.
"""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Iterable, Iterator
from functools import reduce

FIRST = "first"
SECOND = "second"


def light_seeker(coin_piles: Iterable[int]) -> str:
    """Return the winner, stopping at the first odd pile found."""
    return FIRST if any(pile % 2 == 1 for pile in coin_piles) else SECOND


def light_merger(coin_piles: Iterable[int]) -> str:
    """Return the winner by OR-ing the parity bit of every pile."""
    any_odd = reduce(operator.or_, (pile & 1 for pile in coin_piles), 0)
    return FIRST if any_odd == 1 else SECOND


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _read_games(lines: Iterable[str]) -> Iterator[list[int]]:
    """Yield the pile sizes of each game described by the input lines."""
    line_iter = iter(lines)
    game_count = int(_next_line(line_iter).strip())
    for _ in range(game_count):
        int(_next_line(line_iter).strip())  # pile count; the pile line is authoritative
        yield [int(token) for token in _next_line(line_iter).split()]


def main(argv: list[str] | None = None) -> int:
    """Read games from standard input and print each winner."""
    parser = argparse.ArgumentParser(
        description="Read coin-pile games from standard input and print the winner of each."
    )
    parser.parse_args(argv)
    for coin_piles in _read_games(sys.stdin):
        print(light_seeker(coin_piles))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())