"""
Availability of a turf's hourly slots on a given date.

A slot is unavailable when it has already started (any slot on an earlier
date, or a slot starting at or before the current time today) or when a
pending/confirmed booking holds the same start hour.
Bookings are matched to slots by start hour only: every booking sits on the
one-hour grid produced by the slot generator.
"""

from datetime import date, datetime
from typing import Iterable, List, Set

from app.enums.booking_status import ACTIVE_BOOKING_STATUSES
from app.models.booking import Booking
from app.schemas.slot import SlotAvailability, TimeSlot
from app.utils.time_utils import combine_date_and_minutes, parse_time_to_minutes


def get_booked_hours(bookings: Iterable[Booking], target_date: date) -> Set[int]:
    """
    Start hours held by active bookings on the target date.

    Args:
        bookings: Bookings of a single turf
        target_date: Date to look at

    Returns:
        Set of start hours (0-23)
    """
    booked_hours = set()
    for booking in bookings:
        if booking.date != target_date:
            continue
        if booking.status not in ACTIVE_BOOKING_STATUSES:
            continue
        start_minutes = parse_time_to_minutes(booking.start_time)
        if start_minutes == -1:
            continue  # Skip invalid times
        booked_hours.add(start_minutes // 60)
    return booked_hours


def is_slot_in_past(slot: TimeSlot, target_date: date, now: datetime) -> bool:
    """Every slot of an earlier date is past; future dates never are."""
    if target_date < now.date():
        return True
    if target_date > now.date():
        return False
    slot_start = combine_date_and_minutes(
        target_date, parse_time_to_minutes(slot.start_time)
    )
    return now >= slot_start


def resolve_availability(
    slots: Iterable[TimeSlot],
    existing_bookings: Iterable[Booking],
    target_date: date,
    now: datetime,
) -> List[SlotAvailability]:
    """
    Marks each slot as available or not, keeping the input order.

    Args:
        slots: Candidate slots, usually from generate_slots
        existing_bookings: Bookings of the turf for the target date
        target_date: Date the slots belong to
        now: Current facility-local time

    Returns:
        List of slots annotated with is_available
    """
    booked_hours = get_booked_hours(existing_bookings, target_date)

    resolved = []
    for slot in slots:
        start_hour = parse_time_to_minutes(slot.start_time) // 60
        is_available = not (
            is_slot_in_past(slot, target_date, now) or start_hour in booked_hours
        )
        resolved.append(
            SlotAvailability(
                start_time=slot.start_time,
                end_time=slot.end_time,
                is_available=is_available,
            )
        )
    return resolved
