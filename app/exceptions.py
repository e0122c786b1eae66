"""
Domain errors raised by the booking engine.

Each error carries a stable ``code`` and the HTTP status the API layer
answers with, so callers can tell a slot conflict (pick another slot) apart
from an authorization failure (nothing the client can retry).
"""

from typing import Optional

from fastapi import status


class BookingError(Exception):
    """Base class for all booking engine errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Booking request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        self.code = self.__class__.__name__
        super().__init__(self.message)


class TurfNotFound(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Turf not found"


class BookingNotFound(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Booking not found"


class Unauthenticated(BookingError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(BookingError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to perform this action"


class InvalidSlot(BookingError):
    """The requested times are not a slot of the turf's hourly grid."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Requested time is not a valid slot for this turf"


class SlotUnavailable(BookingError):
    """The slot is already held by another booking or has already started."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Slot is not available"


class InvalidTransition(BookingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Booking status change not permitted"
