from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional

from app.enums.booking_status import BookingStatus
from app.schemas.turf import TurfResponse


class BookingCreate(BaseModel):
    turf_id: int
    date: date
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM"


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingPublic(BaseModel):
    """Booking as seen by anyone who is not the turf owner (no player id)"""

    id: int
    turf_id: int
    date: date
    start_time: str
    end_time: str
    status: BookingStatus
    is_booked: bool = True

    class Config:
        from_attributes = True


class Booking(BaseModel):
    id: int
    turf_id: int
    user_id: int
    date: date
    start_time: str
    end_time: str
    status: BookingStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BookingWithTurf(Booking):
    turf: Optional[TurfResponse] = None
