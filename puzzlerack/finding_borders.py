"""Find every border of a word.

A border is a proper prefix of the word that is also a suffix of it.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import islice


def ribbon_tracer(letters: Sequence) -> list[int]:
    """Return all border lengths in ascending order using the prefix function."""
    if not letters:
        return []
    jump = [0] * len(letters)
    match_len = 0
    for pos, letter in enumerate(islice(letters, 1, None), start=1):
        while match_len > 0 and letters[match_len] != letter:
            match_len = jump[match_len - 1]
        if letters[match_len] == letter:
            match_len += 1
        jump[pos] = match_len

    borders = []
    length = jump[-1]
    while length > 0:
        borders.append(length)
        length = jump[length - 1]
    return sorted(borders)


def ribbon_checker(letters: Sequence) -> list[int]:
    """Return all border lengths in ascending order by comparing every prefix and suffix."""
    return [
        length
        for length in range(1, len(letters))
        if letters[:length] == letters[len(letters) - length :]
    ]


def main(argv: list[str] | None = None) -> int:
    """Read a word from standard input and print its border lengths."""
    parser = argparse.ArgumentParser(
        description="Read a word from standard input and print the lengths of its borders."
    )
    parser.parse_args(argv)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("missing input word")
    borders = ribbon_tracer(line.strip().encode("utf-8"))
    print(" ".join(str(length) for length in borders))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())