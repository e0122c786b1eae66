"""
Booking lifecycle: slot listing, creation and status transitions.

Every operation re-reads bookings from the database; nothing is cached
between requests. Failures are raised as BookingError subclasses and left
to the API layer to translate.
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud import booking as booking_crud
from app.crud import turf as turf_crud
from app.enums.booking_status import BookingStatus
from app.exceptions import (
    BookingNotFound,
    Forbidden,
    InvalidSlot,
    InvalidTransition,
    SlotUnavailable,
    TurfNotFound,
    Unauthenticated,
)
from app.models.booking import Booking
from app.models.user import User
from app.schemas.slot import SlotAvailability
from app.services.availability import resolve_availability
from app.services.booking_policy import can_transition, is_transition_defined
from app.services.slot_generator import find_slot, generate_slots


def list_available_slots(
    db: Session, turf_id: int, target_date: date, now: datetime
) -> List[SlotAvailability]:
    turf = turf_crud.get_turf(db, turf_id)
    if not turf:
        raise TurfNotFound()

    slots = generate_slots(turf, target_date)
    existing = booking_crud.list_bookings(db, turf_id, target_date)
    return resolve_availability(slots, existing, target_date, now)


def create_booking(
    db: Session,
    turf_id: int,
    target_date: date,
    start_time: str,
    end_time: str,
    current_user: Optional[User],
    now: datetime,
) -> Booking:
    """
    Creates a pending booking for one slot of a turf.

    Args:
        db: Database session
        turf_id: Turf to book
        target_date: Calendar date of the booking
        start_time: Slot start ("HH:MM")
        end_time: Slot end ("HH:MM"), exactly one hour after start_time
        current_user: Requesting user, None when anonymous
        now: Current facility-local time

    Returns:
        The new booking, in pending status

    Raises:
        Unauthenticated, TurfNotFound, InvalidSlot, SlotUnavailable
    """
    if current_user is None:
        raise Unauthenticated()

    turf = turf_crud.get_turf(db, turf_id)
    if not turf:
        raise TurfNotFound()

    slot = find_slot(turf, target_date, start_time, end_time)
    if slot is None:
        raise InvalidSlot(
            f"{start_time}-{end_time} is not a one-hour slot between "
            f"{turf.available_from} and {turf.available_to}"
        )

    if target_date < now.date():
        raise SlotUnavailable("Cannot book a date that has already passed")

    # Fresh read, not the snapshot the client listed slots from
    existing = booking_crud.list_bookings(db, turf_id, target_date)
    resolved = resolve_availability([slot], existing, target_date, now)
    if not resolved[0].is_available:
        raise SlotUnavailable()

    booking = Booking(
        turf_id=turf_id,
        user_id=current_user.id,
        date=target_date,
        start_time=slot.start_time,
        end_time=slot.end_time,
        status=BookingStatus.PENDING,
    )
    return booking_crud.insert_booking_if_available(db, booking)


def transition_booking(
    db: Session,
    booking_id: int,
    target_status: BookingStatus,
    current_user: Optional[User],
) -> Booking:
    """
    Moves a booking to target_status.

    The transition itself is checked before the actor, so a cancelled booking
    answers InvalidTransition to everyone.

    Raises:
        Unauthenticated, BookingNotFound, InvalidTransition, Forbidden
    """
    if current_user is None:
        raise Unauthenticated()

    booking = booking_crud.get_booking(db, booking_id)
    if not booking:
        raise BookingNotFound()

    current_status = booking.status
    if not is_transition_defined(current_status, target_status):
        raise InvalidTransition(
            f"Cannot change booking status from {current_status.value} "
            f"to {target_status.value}"
        )

    turf = turf_crud.get_turf(db, booking.turf_id)
    if not can_transition(booking, turf, current_user.id, current_status, target_status):
        if target_status == BookingStatus.CONFIRMED:
            raise Forbidden("Only the turf owner can confirm bookings")
        raise Forbidden("Not allowed to update this booking")

    updated = booking_crud.update_status(
        db, booking_id, target_status, expected_status=current_status
    )
    if updated is None:
        # Another request changed the status after we read it
        raise InvalidTransition("Booking status was changed by another request")
    return updated
