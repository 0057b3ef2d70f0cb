"""Count the increments needed to make an array non-decreasing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from itertools import islice


def lift_blocks(blocks: Iterable[int]) -> int:
    """Return the total of +1 moves that make ``blocks`` non-decreasing.

    The running floor starts at zero, so a negative first value is lifted to zero.
    """
    floor = 0
    total = 0
    for height in blocks:
        new_height = max(height, floor)
        total += new_height - height
        floor = new_height
    return total


def main(argv: list[str] | None = None) -> int:
    """Read an array from standard input and print the moves needed."""
    parser = argparse.ArgumentParser(
        description="Read an array from standard input and print the moves that make it increasing."
    )
    parser.parse_args(argv)
    count_line = sys.stdin.readline()
    values_line = sys.stdin.readline()
    if not count_line or not values_line:
        raise ValueError("unexpected end of input")
    block_count = int(count_line.strip())
    blocks = [int(token) for token in islice(values_line.split(), block_count)]
    print(lift_blocks(blocks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())