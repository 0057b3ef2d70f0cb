"""Solve the Tower of Hanoi.

A stack of rings moves from one pillar to another, one ring at a time,
never placing a larger ring on a smaller one.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Hashable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class RingMove:
    """One ring lifted from the ``source`` pillar onto the ``dest`` pillar."""

    source: Hashable
    dest: Hashable

    def __str__(self) -> str:
        return f"{self.source} {self.dest}"


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"ring count must not be negative, got {n}")


def move_count(n: int) -> int:
    """Return the number of moves needed for ``n`` rings."""
    _check_count(n)
    return (1 << n) - 1


def _shift(n: int, source: Hashable, dest: Hashable, spare: Hashable) -> Iterator[RingMove]:
    if n == 0:
        return
    yield from _shift(n - 1, source, spare, dest)
    yield RingMove(source, dest)
    yield from _shift(n - 1, spare, dest, source)


def ring_shifter(n: int, source: Hashable, dest: Hashable, spare: Hashable) -> list[RingMove]:
    """Return the moves for ``n`` rings, found recursively."""
    _check_count(n)
    return list(_shift(n, source, dest, spare))


def ring_machine(n: int, source: Hashable, dest: Hashable, spare: Hashable) -> list[RingMove]:
    """Return the moves for ``n`` rings, found with an explicit pile of jobs."""
    _check_count(n)
    moves: list[RingMove] = []
    jobs = [(n, source, dest, spare)]
    while jobs:
        count, src, dst, hlp = jobs.pop()
        if count == 0:
            continue
        if count == 1:
            moves.append(RingMove(src, dst))
            continue
        # Pushed in reverse: the pile is last in, first out.
        jobs.append((count - 1, hlp, dst, src))
        jobs.append((1, src, dst, hlp))
        jobs.append((count - 1, src, hlp, dst))
    return moves


def main(argv: list[str] | None = None) -> int:
    """Read a ring count from standard input and print every move."""
    parser = argparse.ArgumentParser(
        description="Read a ring count from standard input and print the Tower of Hanoi moves."
    )
    parser.parse_args(argv)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("missing ring count")
    n = int(line.strip())
    total = move_count(n)

    started = time.perf_counter()
    recursive_moves = ring_shifter(n, 1, 3, 2)
    recursive_time = time.perf_counter() - started

    started = time.perf_counter()
    ring_machine(n, 1, 3, 2)
    iterative_time = time.perf_counter() - started

    out = [str(total)]
    out.extend(str(move) for move in recursive_moves)
    sys.stdout.write("\n".join(out) + "\n")

    print(f"Recursive : {recursive_time:.6f}s", file=sys.stderr)
    print(f"Iterative : {iterative_time:.6f}s", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())