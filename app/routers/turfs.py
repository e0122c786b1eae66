from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional, Union
from datetime import date, datetime

from app.database import get_db
from app.crud import turf as crud
from app.crud import booking as booking_crud
from app.schemas.turf import TurfResponse, TurfCreate, TurfUpdate
from app.schemas.booking import Booking, BookingPublic
from app.schemas.slot import AvailableSlotsResponse
from app.services.auth import get_current_user, get_optional_user, require_owner
from app.services.booking_lifecycle import list_available_slots
from app.utils.clock import get_now
from app.utils.time_utils import parse_time_to_minutes
from app.models.user import User

router = APIRouter()


def _get_own_turf(db: Session, turf_id: int, current_user: User):
    db_turf = crud.get_turf(db, turf_id=turf_id)
    if db_turf is None:
        raise HTTPException(status_code=404, detail="Turf not found")
    if db_turf.owner_id != current_user.id:
        raise HTTPException(
            status_code=403, detail="You can only manage your own turfs"
        )
    return db_turf


@router.post("/", response_model=TurfResponse, status_code=201)
def create_turf(
    turf: TurfCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_owner),
):
    return crud.create_turf(db=db, turf=turf, owner_id=current_user.id)


@router.get("/", response_model=List[TurfResponse])
def read_turfs(
    skip: int = 0,
    limit: int = 100,
    sport_type: Optional[str] = None,
    location: Optional[str] = None,
    max_price: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return crud.get_turfs(
        db,
        skip=skip,
        limit=limit,
        sport_type=sport_type,
        location=location,
        max_price=max_price,
    )


@router.get("/owner/{owner_id}", response_model=List[TurfResponse])
def read_turfs_by_owner(owner_id: int, db: Session = Depends(get_db)):
    return crud.get_turfs_by_owner(db, owner_id=owner_id)


@router.get("/{turf_id}", response_model=TurfResponse)
def read_turf(turf_id: int, db: Session = Depends(get_db)):
    db_turf = crud.get_turf(db, turf_id=turf_id)
    if db_turf is None:
        raise HTTPException(status_code=404, detail="Turf not found")
    return db_turf


@router.put("/{turf_id}", response_model=TurfResponse)
def update_turf(
    turf_id: int,
    turf: TurfUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_turf = _get_own_turf(db, turf_id, current_user)

    # The window must stay non-empty once partial updates are applied
    available_from = turf.available_from or db_turf.available_from
    available_to = turf.available_to or db_turf.available_to
    if parse_time_to_minutes(available_from) >= parse_time_to_minutes(available_to):
        raise HTTPException(
            status_code=400, detail="available_to must be later than available_from"
        )

    return crud.update_turf(db=db, turf_id=turf_id, turf=turf)


@router.delete("/{turf_id}", status_code=204)
def delete_turf(
    turf_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _get_own_turf(db, turf_id, current_user)
    crud.delete_turf(db=db, turf_id=turf_id)


@router.get("/{turf_id}/slots", response_model=AvailableSlotsResponse)
def read_available_slots(
    turf_id: int,
    target_date: date = Query(..., alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    slots = list_available_slots(db, turf_id, target_date, now)
    return {
        "turf_id": turf_id,
        "date": target_date,
        "slots": slots,
        "total_available": sum(1 for slot in slots if slot.is_available),
    }


@router.get(
    "/{turf_id}/bookings", response_model=List[Union[Booking, BookingPublic]]
)
def read_turf_bookings(
    turf_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """
    Bookings of a turf. Only the owner sees who booked; everyone else gets
    the occupied times without player ids.
    """
    db_turf = crud.get_turf(db, turf_id=turf_id)
    if db_turf is None:
        raise HTTPException(status_code=404, detail="Turf not found")

    bookings = booking_crud.get_bookings_by_turf(db, turf_id)
    if current_user is None or current_user.id != db_turf.owner_id:
        return [BookingPublic.model_validate(b) for b in bookings]
    return [Booking.model_validate(b) for b in bookings]
