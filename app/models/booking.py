from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    ForeignKey,
    Enum,
    Index,
    text,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base
from app.enums.booking_status import BookingStatus


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        # At most one pending/confirmed booking per turf, date and start time.
        # Cancelled rows fall outside the index and free the slot.
        Index(
            "uq_active_booking_per_slot",
            "turf_id",
            "date",
            "start_time",
            unique=True,
            postgresql_where=text("status <> 'CANCELLED'"),
            sqlite_where=text("status <> 'CANCELLED'"),
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    turf_id = Column(Integer, ForeignKey("turfs.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    start_time = Column(String, nullable=False)  # "HH:MM"
    end_time = Column(String, nullable=False)  # "HH:MM"
    status = Column(
        Enum(BookingStatus), nullable=False, default=BookingStatus.PENDING
    )
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    turf = relationship("app.models.turf.Turf", back_populates="bookings")
    user = relationship("app.models.user.User", back_populates="bookings")
