"""Pick the largest number of non-overlapping films at a festival.

The greedy rule is to always take the film that ends soonest.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from functools import reduce
from operator import itemgetter

Screening = tuple[int, int]


def _programme(screenings: Iterable[Screening]) -> list[Screening]:
    return sorted(screenings, key=itemgetter(1))


def screen_scheduler(screenings: Iterable[Screening]) -> int:
    """Return the most films watchable, scanning films by finish time."""
    watched = 0
    screen_free = -math.inf
    for start, finish in _programme(screenings):
        if start >= screen_free:
            watched += 1
            screen_free = finish
    return watched


def film_sweeper(screenings: Iterable[Screening]) -> int:
    """Return the most films watchable, folding over films by finish time."""

    def step(state: tuple[int, float], film: Screening) -> tuple[int, float]:
        watched, screen_free = state
        start, finish = film
        if start >= screen_free:
            return watched + 1, finish
        return state

    watched, _ = reduce(step, _programme(screenings), (0, -math.inf))
    return watched


def main(argv: list[str] | None = None) -> int:
    """Read films from standard input and print how many can be watched."""
    parser = argparse.ArgumentParser(
        description="Read film times from standard input and print the most films one can watch."
    )
    parser.parse_args(argv)
    count_line = sys.stdin.readline()
    if not count_line:
        raise ValueError("missing film count")
    screenings = []
    for _ in range(int(count_line.strip())):
        parts = sys.stdin.readline().split()
        if len(parts) < 2:
            raise ValueError("expected a start and finish time")
        screenings.append((int(parts[0]), int(parts[1])))
    print(screen_scheduler(screenings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())