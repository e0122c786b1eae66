from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.crud import review as crud
from app.crud import turf as turf_crud
from app.schemas.review import Review, ReviewCreate
from app.services.auth import get_current_user
from app.models.user import User

router = APIRouter()


@router.get("/turf/{turf_id}", response_model=List[Review])
def read_turf_reviews(turf_id: int, db: Session = Depends(get_db)):
    if turf_crud.get_turf(db, turf_id) is None:
        raise HTTPException(status_code=404, detail="Turf not found")
    return crud.get_reviews_by_turf(db, turf_id)


@router.post("/", response_model=Review, status_code=201)
def create_review(
    review: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if turf_crud.get_turf(db, review.turf_id) is None:
        raise HTTPException(status_code=404, detail="Turf not found")

    if crud.get_user_review_for_turf(db, review.turf_id, current_user.id):
        raise HTTPException(
            status_code=400, detail="You have already reviewed this turf"
        )

    db_review = crud.create_review(db, review, user_id=current_user.id)
    if db_review is None:
        raise HTTPException(
            status_code=400, detail="You have already reviewed this turf"
        )
    return db_review
