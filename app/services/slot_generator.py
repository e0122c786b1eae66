from datetime import date
from typing import List, Optional

from app.models.turf import Turf
from app.schemas.slot import TimeSlot
from app.utils.time_utils import (
    SLOT_DURATION_MINUTES,
    minutes_to_time_string,
    parse_time_to_minutes,
)


def generate_slots(turf: Turf, target_date: date) -> List[TimeSlot]:
    """
    Generates the hourly slots of a turf for a specific date.

    Slots start on whole hours inside the turf's operating window and are
    always one hour wide. A trailing partial hour is dropped, so a window of
    06:00-21:30 ends with the 20:00-21:00 slot.

    Args:
        turf: Turf with available_from / available_to ("HH:MM")
        target_date: Calendar date the slots are for

    Returns:
        Chronologically ordered list of slots, empty if the window is empty
        or cannot be parsed
    """
    opening = parse_time_to_minutes(turf.available_from)
    closing = parse_time_to_minutes(turf.available_to)

    if opening == -1 or closing == -1 or opening >= closing:
        return []

    # First whole hour at or after opening time
    current = -(-opening // SLOT_DURATION_MINUTES) * SLOT_DURATION_MINUTES

    slots = []
    while current + SLOT_DURATION_MINUTES <= closing:
        slots.append(
            TimeSlot(
                start_time=minutes_to_time_string(current),
                end_time=minutes_to_time_string(current + SLOT_DURATION_MINUTES),
            )
        )
        current += SLOT_DURATION_MINUTES

    return slots


def find_slot(
    turf: Turf, target_date: date, start_time: str, end_time: str
) -> Optional[TimeSlot]:
    """Returns the grid slot matching the requested times, if there is one."""
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)
    if start == -1 or end == -1:
        return None

    for slot in generate_slots(turf, target_date):
        if (
            parse_time_to_minutes(slot.start_time) == start
            and parse_time_to_minutes(slot.end_time) == end
        ):
            return slot
    return None
