"""Count the subordinates of every employee in a company tree.

Employee 1 is the director; every other employee has exactly one boss.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence

OrgChart = Sequence[Sequence[int]]
DIRECTOR = 1


def build_org_chart(headcount: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build an adjacency list, indexed from 1, from (boss, worker) pairs."""
    if headcount < 1:
        raise ValueError(f"headcount must be at least 1, got {headcount}")
    chart: list[list[int]] = [[] for _ in range(headcount + 1)]
    for boss, worker in edges:
        for staff_id in (boss, worker):
            if not 1 <= staff_id <= headcount:
                raise ValueError(f"employee {staff_id} is outside 1..{headcount}")
        chart[boss].append(worker)
        chart[worker].append(boss)
    return chart


def _check_chart(org_chart: OrgChart) -> None:
    if len(org_chart) <= DIRECTOR:
        raise ValueError("org chart has no director")


def branch_counter(org_chart: OrgChart) -> list[int]:
    """Return subordinate counts, gathered depth first from the director down."""
    _check_chart(org_chart)
    tally = [0] * len(org_chart)
    stack = [(DIRECTOR, 0, iter(org_chart[DIRECTOR]))]
    while stack:
        staff_id, boss_id, reports = stack[-1]
        for report in reports:
            if report != boss_id:
                stack.append((report, staff_id, iter(org_chart[report])))
                break
        else:
            stack.pop()
            if stack:
                tally[boss_id] += tally[staff_id] + 1
    return tally


def queue_counter(headcount: int, org_chart: OrgChart) -> list[int]:
    """Return subordinate counts, visiting employees level by level."""
    _check_chart(org_chart)
    tally = [0] * (headcount + 1)
    direct_boss = [0] * (headcount + 1)
    reception = deque([DIRECTOR])
    visit_log: list[int] = []
    while reception:
        staff_id = reception.popleft()
        visit_log.append(staff_id)
        for report in org_chart[staff_id]:
            if report != direct_boss[staff_id]:
                direct_boss[report] = staff_id
                reception.append(report)
    for staff_id in reversed(visit_log):
        boss = direct_boss[staff_id]
        if boss != 0:
            tally[boss] += tally[staff_id] + 1
    return tally


def main(argv: list[str] | None = None) -> int:
    """Read the company tree from standard input and print each subordinate count."""
    parser = argparse.ArgumentParser(
        description="Read a company tree from standard input and print subordinate counts."
    )
    parser.parse_args(argv)
    count_line = sys.stdin.readline()
    if not count_line:
        raise ValueError("missing employee count")
    headcount = int(count_line.strip())
    edges: list[tuple[int, int]] = []
    if headcount > 1:
        boss_line = sys.stdin.readline()
        if not boss_line:
            raise ValueError("missing boss list")
        edges = [
            (int(boss), staff_id)
            for staff_id, boss in enumerate(boss_line.split(), start=2)
        ]
    tally = queue_counter(headcount, build_org_chart(headcount, edges))
    print(" ".join(str(count) for count in tally[1:]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())