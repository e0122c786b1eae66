from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from app.database import Base
from app.enums.user_role import UserRole
from datetime import datetime


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.PLAYER)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    turfs = relationship("app.models.turf.Turf", back_populates="owner")
    bookings = relationship("app.models.booking.Booking", back_populates="user")
    reviews = relationship("app.models.review.Review", back_populates="user")

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER
