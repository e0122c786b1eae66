"""
Tests for the booking status authorization table
"""
import pytest

from app.enums.booking_status import BookingActor, BookingStatus
from app.models.booking import Booking
from app.models.turf import Turf
from app.services.booking_policy import (
    TRANSITION_RULES,
    actors_for,
    can_transition,
    can_view,
    is_transition_defined,
)

PLAYER_ID = 2
OWNER_ID = 1
STRANGER_ID = 3

PENDING = BookingStatus.PENDING
CONFIRMED = BookingStatus.CONFIRMED
CANCELLED = BookingStatus.CANCELLED


@pytest.fixture
def booking():
    return Booking(id=10, turf_id=1, user_id=PLAYER_ID, status=PENDING)


@pytest.fixture
def turf():
    return Turf(id=1, owner_id=OWNER_ID)


def test_actors_for_identifies_roles(booking, turf):
    assert actors_for(booking, turf, PLAYER_ID) == {BookingActor.PLAYER}
    assert actors_for(booking, turf, OWNER_ID) == {BookingActor.TURF_OWNER}
    assert actors_for(booking, turf, STRANGER_ID) == set()
    assert actors_for(booking, turf, None) == set()


def test_owner_booking_own_turf_holds_both_roles(turf):
    own_booking = Booking(id=11, turf_id=1, user_id=OWNER_ID, status=PENDING)

    assert actors_for(own_booking, turf, OWNER_ID) == {
        BookingActor.PLAYER,
        BookingActor.TURF_OWNER,
    }


def test_missing_turf_leaves_only_player_role(booking):
    assert actors_for(booking, None, PLAYER_ID) == {BookingActor.PLAYER}
    assert actors_for(booking, None, OWNER_ID) == set()


def test_only_three_transitions_exist():
    assert set(TRANSITION_RULES) == {
        (PENDING, CONFIRMED),
        (PENDING, CANCELLED),
        (CONFIRMED, CANCELLED),
    }
    for from_status in BookingStatus:
        assert not is_transition_defined(CANCELLED, from_status)
        assert not is_transition_defined(from_status, from_status)
    assert not is_transition_defined(CONFIRMED, PENDING)


@pytest.mark.parametrize(
    "from_status,to_status,user_id,expected",
    [
        (PENDING, CONFIRMED, OWNER_ID, True),
        (PENDING, CONFIRMED, PLAYER_ID, False),
        (PENDING, CONFIRMED, STRANGER_ID, False),
        (PENDING, CANCELLED, OWNER_ID, True),
        (PENDING, CANCELLED, PLAYER_ID, True),
        (PENDING, CANCELLED, STRANGER_ID, False),
        (CONFIRMED, CANCELLED, OWNER_ID, True),
        (CONFIRMED, CANCELLED, PLAYER_ID, True),
        (CONFIRMED, CANCELLED, STRANGER_ID, False),
        (CONFIRMED, PENDING, OWNER_ID, False),
        (CONFIRMED, CONFIRMED, OWNER_ID, False),
        (CANCELLED, PENDING, PLAYER_ID, False),
        (CANCELLED, CONFIRMED, OWNER_ID, False),
        (CANCELLED, CANCELLED, OWNER_ID, False),
    ],
)
def test_can_transition(booking, turf, from_status, to_status, user_id, expected):
    assert can_transition(booking, turf, user_id, from_status, to_status) is expected


def test_can_view(booking, turf):
    assert can_view(booking, turf, PLAYER_ID)
    assert can_view(booking, turf, OWNER_ID)
    assert not can_view(booking, turf, STRANGER_ID)
