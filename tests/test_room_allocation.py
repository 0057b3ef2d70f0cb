import io

import pytest

from puzzlerack.room_allocation import (
    HotelResult,
    checkout_queue,
    hotel_desk,
    main,
    verify_hotel,
)


def both_agree(bookings):
    desk = hotel_desk(bookings)
    queue = checkout_queue(bookings)
    assert desk.rooms_needed == queue.rooms_needed
    assert verify_hotel(bookings, desk)
    assert verify_hotel(bookings, queue)
    return desk.rooms_needed


def test_basic_two_rooms():
    assert both_agree([(1, 3), (2, 5), (4, 6)]) == 2


def test_all_overlap():
    assert both_agree([(1, 10), (2, 10), (3, 10)]) == 3


def test_no_overlap():
    assert both_agree([(1, 2), (3, 4), (5, 6)]) == 1


def test_single_guest():
    assert both_agree([(1, 5)]) == 1


def test_two_overlap():
    assert both_agree([(1, 5), (2, 6)]) == 2


def test_two_no_overlap():
    assert both_agree([(1, 3), (3, 5)]) == 1


def test_many_guests():
    assert both_agree([(1, 3), (2, 4), (3, 5), (4, 6), (5, 7)]) == 2


def test_all_same_time():
    assert both_agree([(1, 5), (1, 5), (1, 5)]) == 3


def test_large_input():
    bookings = [(i, i + 50) for i in range(100)]
    result = both_agree(bookings)
    assert result > 0
    assert result == 50


def test_room_reuse():
    assert both_agree([(1, 3), (4, 6), (2, 5)]) == 2


def test_assignment_follows_guest_order():
    result = checkout_queue([(1, 3), (2, 5), (4, 6)])
    assert result == HotelResult(rooms_needed=2, room_for_guest=[1, 2, 1])


def test_empty_bookings():
    assert hotel_desk([]) == HotelResult(rooms_needed=0, room_for_guest=[])
    assert checkout_queue([]) == HotelResult(rooms_needed=0, room_for_guest=[])


def test_verify_detects_clash():
    bookings = [(1, 5), (2, 6)]
    assert verify_hotel(bookings, HotelResult(rooms_needed=1, room_for_guest=[1, 1])) is False


def test_verify_rejects_mismatched_result():
    with pytest.raises(ValueError):
        verify_hotel([(1, 2)], HotelResult(rooms_needed=0, room_for_guest=[]))


def test_main_prints_assignment(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 3\n2 5\n4 6\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n1\n2\n1\n"


def test_main_rejects_short_line(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n"))
    with pytest.raises(ValueError):
        main([])