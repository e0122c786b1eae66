from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import date, datetime
from typing import List, Optional
import logging

from app.enums.booking_status import ACTIVE_BOOKING_STATUSES, BookingStatus
from app.exceptions import SlotUnavailable
from app.models.booking import Booking
from app.models.turf import Turf

logger = logging.getLogger(__name__)


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def list_bookings(db: Session, turf_id: int, target_date: date) -> List[Booking]:
    """All bookings of a turf on a date, cancelled ones included."""
    return (
        db.query(Booking)
        .filter(Booking.turf_id == turf_id, Booking.date == target_date)
        .order_by(Booking.start_time, Booking.id)
        .all()
    )


def get_bookings_by_turf(db: Session, turf_id: int) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.turf_id == turf_id)
        .order_by(Booking.date, Booking.start_time)
        .all()
    )


def get_bookings_by_user(
    db: Session, user_id: int, status: Optional[BookingStatus] = None
) -> List[Booking]:
    query = db.query(Booking).filter(Booking.user_id == user_id)
    if status:
        query = query.filter(Booking.status == status)
    return query.order_by(Booking.date.desc(), Booking.start_time.desc()).all()


def get_active_booking(
    db: Session, turf_id: int, target_date: date, start_time: str
) -> Optional[Booking]:
    return (
        db.query(Booking)
        .filter(
            Booking.turf_id == turf_id,
            Booking.date == target_date,
            Booking.start_time == start_time,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        .first()
    )


def insert_booking_if_available(db: Session, booking: Booking) -> Booking:
    """
    Inserts a booking unless its slot is already held.

    The check and the insert are atomic per (turf, date, start_time): the turf
    row is locked where the backend supports SELECT FOR UPDATE, and the
    partial unique index uq_active_booking_per_slot rejects a concurrent
    insert that slipped past the check.

    Raises:
        SlotUnavailable: an active booking already holds the slot
    """
    db.query(Turf).filter(Turf.id == booking.turf_id).with_for_update().first()

    existing = get_active_booking(db, booking.turf_id, booking.date, booking.start_time)
    if existing is not None:
        db.rollback()
        logger.info(
            f"Slot {booking.start_time} on {booking.date} for turf {booking.turf_id} "
            f"already held by booking {existing.id}"
        )
        raise SlotUnavailable("This slot has already been booked")

    db.add(booking)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(
            f"Concurrent booking rejected for turf {booking.turf_id} "
            f"on {booking.date} at {booking.start_time}"
        )
        raise SlotUnavailable("This slot has already been booked")

    db.refresh(booking)
    return booking


def update_status(
    db: Session,
    booking_id: int,
    new_status: BookingStatus,
    expected_status: Optional[BookingStatus] = None,
) -> Optional[Booking]:
    """
    Sets the status of a booking in a single UPDATE statement.

    When expected_status is given the row is only updated if it still has
    that status, so two concurrent transitions cannot both apply.

    Returns:
        The updated booking, or None when no row matched
    """
    query = db.query(Booking).filter(Booking.id == booking_id)
    if expected_status is not None:
        query = query.filter(Booking.status == expected_status)

    updated = query.update(
        {Booking.status: new_status, Booking.updated_at: datetime.utcnow()},
        synchronize_session=False,
    )
    db.commit()

    if not updated:
        return None
    return get_booking(db, booking_id)
