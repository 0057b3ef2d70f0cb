"""Assign hotel rooms to guests using as few rooms as possible.

A room becomes free for a new guest when its previous checkout time is at or
before the new guest's arrival time.
"""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from sortedcontainers import SortedDict

Booking = tuple[int, int]


@dataclass
class HotelResult:
    """How many rooms were opened and which room each guest was given."""

    rooms_needed: int
    room_for_guest: list[int] = field(default_factory=list)


def _arrival_order(bookings: Sequence[Booking]) -> list[tuple[int, int, int]]:
    return sorted((checkin, checkout, guest) for guest, (checkin, checkout) in enumerate(bookings))


def hotel_desk(bookings: Sequence[Booking]) -> HotelResult:
    """Assign rooms using an ordered board of checkout times."""
    board: SortedDict = SortedDict()
    room_for_guest = [0] * len(bookings)
    next_room = 1
    for checkin, checkout, guest in _arrival_order(bookings):
        if board and board.peekitem(0)[0] <= checkin:
            _, room = board.popitem(0)
        else:
            room = next_room
            next_room += 1
        room_for_guest[guest] = room
        # A later guest with the same checkout time replaces the earlier entry.
        board[checkout] = room
    return HotelResult(rooms_needed=next_room - 1, room_for_guest=room_for_guest)


def checkout_queue(bookings: Sequence[Booking]) -> HotelResult:
    """Assign rooms using a min-heap of (checkout time, room)."""
    heap: list[tuple[int, int]] = []
    room_for_guest = [0] * len(bookings)
    next_room = 1
    for checkin, checkout, guest in _arrival_order(bookings):
        if heap and heap[0][0] <= checkin:
            _, room = heapq.heappop(heap)
        else:
            room = next_room
            next_room += 1
        room_for_guest[guest] = room
        heapq.heappush(heap, (checkout, room))
    return HotelResult(rooms_needed=next_room - 1, room_for_guest=room_for_guest)


def verify_hotel(bookings: Sequence[Booking], result: HotelResult) -> bool:
    """Return True when no two guests sharing a room overlap in time."""
    if len(result.room_for_guest) != len(bookings):
        raise ValueError("result does not cover every booking")
    stays = zip(bookings, result.room_for_guest)
    for ((a1, d1), room1), ((a2, d2), room2) in combinations(stays, 2):
        if room1 == room2 and a1 < d2 and a2 < d1:
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Read bookings from standard input and print the room assignment."""
    parser = argparse.ArgumentParser(
        description="Read hotel bookings from standard input and print a room assignment."
    )
    parser.parse_args(argv)
    count_line = sys.stdin.readline()
    if not count_line:
        raise ValueError("missing booking count")
    bookings = []
    for _ in range(int(count_line.strip())):
        parts = sys.stdin.readline().split()
        if len(parts) < 2:
            raise ValueError("expected a checkin and checkout time")
        bookings.append((int(parts[0]), int(parts[1])))
    result = checkout_queue(bookings)
    lines = [str(result.rooms_needed)]
    lines.extend(str(room) for room in result.room_for_guest)
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())