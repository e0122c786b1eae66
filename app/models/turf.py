from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime


class Turf(Base):
    __tablename__ = "turfs"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    sport_type = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False)
    price = Column(Integer, nullable=False)  # per hour, smallest currency unit
    image_url = Column(String, nullable=True)
    available_from = Column(String, nullable=False)  # "HH:MM"
    available_to = Column(String, nullable=False)  # "HH:MM", "24:00" allowed
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    owner = relationship("app.models.user.User", back_populates="turfs")
    bookings = relationship(
        "app.models.booking.Booking",
        back_populates="turf",
        cascade="all, delete-orphan",
    )
    reviews = relationship(
        "app.models.review.Review",
        back_populates="turf",
        cascade="all, delete-orphan",
    )
