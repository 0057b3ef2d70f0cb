"""Count the rooms of a building map.

A map is a grid of floor ('.') and wall ('#') tiles. A room is a set of floor
tiles connected through up, down, left and right steps.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

FLOOR = "."
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Blueprint = Sequence[Sequence[str]]


def parse_blueprint(rows: Iterable[str]) -> tuple[str, ...]:
    """Turn raw map lines into a blueprint, trimming surrounding whitespace."""
    return tuple(row.strip() for row in rows)


def _dimensions(blueprint: Blueprint) -> tuple[int, int]:
    if not blueprint:
        raise ValueError("blueprint has no rows")
    cols = len(blueprint[0])
    if any(len(row) != cols for row in blueprint):
        raise ValueError("blueprint rows differ in length")
    return len(blueprint), cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for step_r, step_c in _STEPS:
        r, c = row + step_r, col + step_c
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _flood_count(blueprint: Blueprint, depth_first: bool) -> int:
    rows, cols = _dimensions(blueprint)
    visited: set[tuple[int, int]] = set()
    rooms = 0
    for r, line in enumerate(blueprint):
        for c, tile in enumerate(line):
            if tile != FLOOR or (r, c) in visited:
                continue
            rooms += 1
            visited.add((r, c))
            frontier = deque([(r, c)])
            take = frontier.pop if depth_first else frontier.popleft
            while frontier:
                row, col = take()
                for tile_pos in _neighbours(row, col, rows, cols):
                    nr, nc = tile_pos
                    if blueprint[nr][nc] == FLOOR and tile_pos not in visited:
                        visited.add(tile_pos)
                        frontier.append(tile_pos)
    return rooms


def count_with_diver(blueprint: Blueprint) -> int:
    """Count rooms by exploring each one depth first."""
    return _flood_count(blueprint, depth_first=True)


def count_with_sweeper(blueprint: Blueprint) -> int:
    """Count rooms by spreading through each one breadth first."""
    return _flood_count(blueprint, depth_first=False)


def main(argv: list[str] | None = None) -> int:
    """Read a map from standard input and print its room count."""
    parser = argparse.ArgumentParser(
        description="Read a building map from standard input and print the number of rooms."
    )
    parser.parse_args(argv)
    header = sys.stdin.readline().split()
    if len(header) < 2:
        raise ValueError("expected grid dimensions on the first line")
    rows, _cols = int(header[0]), int(header[1])
    lines = [sys.stdin.readline() for _ in range(rows)]
    if any(not line for line in lines):
        raise ValueError("unexpected end of input")
    print(count_with_sweeper(parse_blueprint(lines)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())