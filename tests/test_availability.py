"""
Tests for slot availability: past slots and conflicting bookings
"""
from datetime import datetime, timedelta

import pytest

from app.enums.booking_status import BookingStatus
from app.models.booking import Booking
from app.models.turf import Turf
from app.schemas.slot import TimeSlot
from app.services.availability import resolve_availability
from app.services.slot_generator import generate_slots

from tests.conftest import NOW, TODAY, TOMORROW


def _booking(booking_date, start_time, status):
    start_hour = int(start_time[:2])
    return Booking(
        turf_id=1,
        user_id=2,
        date=booking_date,
        start_time=start_time,
        end_time=f"{start_hour + 1:02d}:00",
        status=status,
    )


def _by_start(resolved):
    return {slot.start_time: slot.is_available for slot in resolved}


@pytest.fixture
def slots():
    return generate_slots(Turf(available_from="06:00", available_to="22:00"), TODAY)


def test_started_slot_is_unavailable_today(slots):
    resolved = _by_start(resolve_availability(slots, [], TODAY, NOW))

    assert resolved["14:00"] is False
    assert resolved["15:00"] is True
    assert resolved["06:00"] is False


def test_slot_starting_exactly_now_is_unavailable():
    slot = TimeSlot(start_time="15:00", end_time="16:00")
    now = datetime(2026, 10, 19, 15, 0)

    resolved = resolve_availability([slot], [], TODAY, now)

    assert resolved[0].is_available is False


def test_earlier_date_is_entirely_past(slots):
    yesterday = TODAY - timedelta(days=1)

    resolved = resolve_availability(slots, [], yesterday, NOW)

    assert len(resolved) == 16
    assert not any(slot.is_available for slot in resolved)


def test_future_date_ignores_current_time(slots):
    resolved = _by_start(resolve_availability(slots, [], TOMORROW, NOW))

    assert resolved["14:00"] is True
    assert all(resolved.values())


@pytest.mark.parametrize(
    "status,expected",
    [
        (BookingStatus.PENDING, False),
        (BookingStatus.CONFIRMED, False),
        (BookingStatus.CANCELLED, True),
    ],
)
def test_booking_status_decides_conflict(slots, status, expected):
    bookings = [_booking(TOMORROW, "10:00", status)]

    resolved = _by_start(resolve_availability(slots, bookings, TOMORROW, NOW))

    assert resolved["10:00"] is expected
    assert resolved["11:00"] is True


def test_booking_on_another_date_does_not_conflict(slots):
    bookings = [_booking(TODAY, "18:00", BookingStatus.CONFIRMED)]

    resolved = _by_start(resolve_availability(slots, bookings, TOMORROW, NOW))

    assert resolved["18:00"] is True


def test_booking_matches_by_start_hour():
    slot = TimeSlot(start_time="10:00", end_time="11:00")
    bookings = [_booking(TOMORROW, "10:15", BookingStatus.PENDING)]

    resolved = resolve_availability([slot], bookings, TOMORROW, NOW)

    assert resolved[0].is_available is False


def test_order_is_preserved(slots):
    resolved = resolve_availability(slots, [], TOMORROW, NOW)

    assert [s.start_time for s in resolved] == [s.start_time for s in slots]


def test_cancelled_and_active_booking_on_same_slot(slots):
    bookings = [
        _booking(TOMORROW, "09:00", BookingStatus.CANCELLED),
        _booking(TOMORROW, "09:00", BookingStatus.CONFIRMED),
    ]

    resolved = _by_start(resolve_availability(slots, bookings, TOMORROW, NOW))

    assert resolved["09:00"] is False
