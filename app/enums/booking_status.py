from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"  # terminal, frees the slot


# Statuses that hold a slot
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED)


class BookingActor(str, Enum):
    """Relationship of the requesting user to a booking"""

    PLAYER = "player"
    TURF_OWNER = "turf_owner"
