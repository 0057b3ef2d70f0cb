"""Josephus problem with every second child leaving the circle."""

from __future__ import annotations

import argparse
import sys

from sortedcontainers import SortedList


def ring_counter(ring_size: int) -> list[int]:
    """Return the order in which children 1..ring_size leave the circle."""
    if ring_size < 0:
        raise ValueError(f"ring size must not be negative, got {ring_size}")
    ring = SortedList(range(1, ring_size + 1))
    stepped_out: list[int] = []
    idx = 1
    while ring:
        idx %= len(ring)
        stepped_out.append(ring.pop(idx))
        if not ring:
            break
        # The next child slides into this slot; skip over them.
        idx = (idx % len(ring) + 1) % len(ring)
    return stepped_out


def champion_finder(ring_size: int) -> int:
    """Return the last child standing, using the Josephus recurrence."""
    if ring_size < 1:
        raise ValueError(f"ring size must be at least 1, got {ring_size}")
    position = 0
    for size in range(2, ring_size + 1):
        position = (position + 2) % size
    return position + 1


def main(argv: list[str] | None = None) -> int:
    """Read the circle size from standard input and print the elimination order."""
    parser = argparse.ArgumentParser(
        description="Read a circle size from standard input and print the elimination order."
    )
    parser.parse_args(argv)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("missing circle size")
    order = ring_counter(int(line.strip()))
    print(" ".join(str(child) for child in order))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())