"""Split the numbers 1..n into two groups of equal sum."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field


@dataclass
class TrayResult:
    """The two groups of an equal-sum split."""

    tray_a: list[int] = field(default_factory=list)
    tray_b: list[int] = field(default_factory=list)


def _tray_goal(n: int) -> int | None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    total = n * (n + 1) // 2
    if total % 2 != 0:
        return None
    return total // 2


def tray_filler(n: int) -> TrayResult | None:
    """Split greedily from n downward; return None when no split exists."""
    goal = _tray_goal(n)
    if goal is None:
        return None
    result = TrayResult()
    still_needed = goal
    for number in range(n, 0, -1):
        if 0 < number <= still_needed:
            result.tray_a.append(number)
            still_needed -= number
        else:
            result.tray_b.append(number)
    return result


def tray_builder(n: int) -> TrayResult | None:
    """Split by walking inward from both ends; return None when no split exists."""
    goal = _tray_goal(n)
    if goal is None:
        return None
    result = TrayResult()
    left, right = 1, n
    running = 0
    while left <= right:
        if left == right:
            if running + left <= goal:
                result.tray_a.append(left)
            else:
                result.tray_b.append(left)
            break
        if running + right <= goal:
            result.tray_a.append(right)
            running += right
            if running + left <= goal:
                result.tray_a.append(left)
                running += left
            else:
                result.tray_b.append(left)
        else:
            result.tray_b.extend((right, left))
        left += 1
        right -= 1
    return result


def verify_trays(result: TrayResult) -> bool:
    """Return True when both trays have the same sum."""
    return sum(result.tray_a) == sum(result.tray_b)


def main(argv: list[str] | None = None) -> int:
    """Read n from standard input and print an equal-sum split, or NO."""
    parser = argparse.ArgumentParser(
        description="Read n from standard input and split 1..n into two equal-sum sets."
    )
    parser.parse_args(argv)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("missing n")
    result = tray_filler(int(line.strip()))
    if result is None:
        print("NO")
        return 0
    print("YES")
    for tray in (result.tray_a, result.tray_b):
        print(len(tray))
        print(" ".join(str(number) for number in tray))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())