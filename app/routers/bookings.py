from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from app.database import get_db
from app.crud import booking as crud
from app.crud import turf as turf_crud
from app.enums.booking_status import BookingStatus
from app.exceptions import BookingError, BookingNotFound, Forbidden
from app.schemas.booking import (
    Booking,
    BookingCreate,
    BookingStatusUpdate,
    BookingWithTurf,
)
from app.services import booking_lifecycle
from app.services.auth import get_current_user, get_optional_user
from app.services.booking_policy import can_view
from app.utils.clock import get_now
from app.models.user import User

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/", response_model=List[BookingWithTurf])
def read_my_bookings(
    status: Optional[BookingStatus] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return crud.get_bookings_by_user(db, user_id=current_user.id, status=status)


@router.get("/{booking_id}", response_model=BookingWithTurf)
def read_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_booking = crud.get_booking(db, booking_id=booking_id)
    if db_booking is None:
        raise BookingNotFound()
    turf = turf_crud.get_turf(db, db_booking.turf_id)
    if not can_view(db_booking, turf, current_user.id):
        raise Forbidden("You can only view your own bookings")
    return db_booking


@router.post("/", response_model=Booking, status_code=201)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
    now: datetime = Depends(get_now),
):
    try:
        db_booking = booking_lifecycle.create_booking(
            db,
            turf_id=booking.turf_id,
            target_date=booking.date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            current_user=current_user,
            now=now,
        )
    except BookingError as e:
        logger.info(
            f"Booking rejected ({e.code}) for turf {booking.turf_id} "
            f"on {booking.date} {booking.start_time}-{booking.end_time}"
        )
        raise

    logger.info(
        f"Booking {db_booking.id} created by user {db_booking.user_id} for turf "
        f"{db_booking.turf_id} on {db_booking.date} at {db_booking.start_time}"
    )
    return db_booking


@router.patch("/{booking_id}/status", response_model=Booking)
def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    db_booking = booking_lifecycle.transition_booking(
        db,
        booking_id=booking_id,
        target_status=status_update.status,
        current_user=current_user,
    )
    logger.info(
        f"Booking {booking_id} set to {db_booking.status.value} by user {current_user.id}"
    )
    return db_booking
