"""
Helpers for facility-local "HH:MM" time-of-day strings.
Times are handled as minutes since midnight; "24:00" is accepted as the
end of the day so a turf can stay open until midnight.
"""

from datetime import date, datetime, timedelta

MINUTES_PER_DAY = 24 * 60
SLOT_DURATION_MINUTES = 60


def parse_time_to_minutes(time_str: str) -> int:
    """
    Converts an "HH:MM" string to minutes since midnight.

    Args:
        time_str: String in "HH:MM" format

    Returns:
        int: Minutes since midnight (0-1440), or -1 if the string is invalid
    """
    try:
        parts = time_str.split(":")
        if len(parts) != 2 or len(parts[1]) != 2:
            return -1
        hours = int(parts[0])
        minutes = int(parts[1])
    except (ValueError, AttributeError):
        return -1

    if hours < 0 or not 0 <= minutes < 60:
        return -1

    total = hours * 60 + minutes
    if total > MINUTES_PER_DAY:
        return -1
    return total


def minutes_to_time_string(minutes: int) -> str:
    """
    Converts minutes since midnight to an "HH:MM" string.

    Args:
        minutes: Minutes since midnight

    Returns:
        str: String in "HH:MM" format
    """
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours:02d}:{mins:02d}"


def combine_date_and_minutes(target_date: date, minutes: int) -> datetime:
    """Naive facility-local datetime for a time of day on a given date."""
    return datetime.combine(target_date, datetime.min.time()) + timedelta(
        minutes=minutes
    )
