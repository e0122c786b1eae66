"""
Who may move a booking from one status to another.

The policy is a lookup against TRANSITION_RULES plus identity comparison:
the booking's player is the user that made it, the turf owner is the owner
of the turf it references. A user can hold both roles at once.
"""

from typing import Dict, FrozenSet, Optional, Set, Tuple

from app.enums.booking_status import BookingActor, BookingStatus
from app.models.booking import Booking
from app.models.turf import Turf

TRANSITION_RULES: Dict[Tuple[BookingStatus, BookingStatus], FrozenSet[BookingActor]] = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED): frozenset(
        {BookingActor.TURF_OWNER}
    ),
    (BookingStatus.PENDING, BookingStatus.CANCELLED): frozenset(
        {BookingActor.PLAYER, BookingActor.TURF_OWNER}
    ),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED): frozenset(
        {BookingActor.PLAYER, BookingActor.TURF_OWNER}
    ),
}


def actors_for(
    booking: Booking, turf: Optional[Turf], user_id: Optional[int]
) -> Set[BookingActor]:
    actors = set()
    if user_id is None:
        return actors
    if booking.user_id == user_id:
        actors.add(BookingActor.PLAYER)
    if turf is not None and turf.owner_id == user_id:
        actors.add(BookingActor.TURF_OWNER)
    return actors


def is_transition_defined(from_status: BookingStatus, to_status: BookingStatus) -> bool:
    return (from_status, to_status) in TRANSITION_RULES


def can_transition(
    booking: Booking,
    turf: Optional[Turf],
    user_id: Optional[int],
    from_status: BookingStatus,
    to_status: BookingStatus,
) -> bool:
    allowed = TRANSITION_RULES.get((from_status, to_status))
    if not allowed:
        return False
    return bool(actors_for(booking, turf, user_id) & allowed)


def can_view(booking: Booking, turf: Optional[Turf], user_id: Optional[int]) -> bool:
    """Full booking details are visible to its player and the turf owner."""
    return bool(actors_for(booking, turf, user_id))
