"""
Shared pytest configuration
"""
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db

# Import all models so SQLAlchemy can resolve the relationships
from app.models.user import User
from app.models.turf import Turf
from app.models.booking import Booking
from app.models.review import Review
from app.enums.booking_status import BookingStatus
from app.enums.user_role import UserRole
from app.services.auth import create_access_token


# In-memory database for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed facility-local clock: 14:30 on TODAY
TODAY = date(2026, 10, 19)
TOMORROW = TODAY + timedelta(days=1)
NOW = datetime(2026, 10, 19, 14, 30)


def make_user(db, user_id, username, role=UserRole.PLAYER):
    user = User(
        id=user_id,
        username=username,
        email=f"{username}@example.com",
        first_name="Test",
        last_name=username.capitalize(),
        phone="555-0100",
        hashed_password="hashed",
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_booking(db, turf, user, booking_date, start_time, status=BookingStatus.PENDING):
    start_hour = int(start_time.split(":")[0])
    booking = Booking(
        turf_id=turf.id,
        user_id=user.id,
        date=booking_date,
        start_time=start_time,
        end_time=f"{start_hour + 1:02d}:00",
        status=status,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def auth_headers(user):
    token = create_access_token({"sub": user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    """Create the test database and drop it afterwards"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def override_get_db(db):
    """get_db override for tests"""
    def _get_db():
        try:
            yield db
        finally:
            pass
    return _get_db


@pytest.fixture
def owner(db):
    """Turf owner"""
    return make_user(db, 1, "owner", role=UserRole.OWNER)


@pytest.fixture
def player(db):
    """Player who makes bookings"""
    return make_user(db, 2, "player")


@pytest.fixture
def other_player(db):
    """Second player, unrelated to the sample bookings"""
    return make_user(db, 3, "stranger")


@pytest.fixture
def sample_turf(db, owner):
    """Turf open from 06:00 to 22:00"""
    turf = Turf(
        id=1,
        owner_id=owner.id,
        name="Downtown Arena",
        description="Five-a-side artificial grass",
        sport_type="football",
        location="Downtown",
        price=150000,
        available_from="06:00",
        available_to="22:00",
    )
    db.add(turf)
    db.commit()
    db.refresh(turf)
    return turf


@pytest.fixture
def client(override_get_db):
    """FastAPI test client bound to the test session and the fixed clock"""
    from fastapi.testclient import TestClient

    from app.main import app
    from app.utils.clock import get_now

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: NOW
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
