from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.review import Review
from app.schemas.review import ReviewCreate


def get_reviews_by_turf(db: Session, turf_id: int) -> List[Review]:
    return (
        db.query(Review)
        .filter(Review.turf_id == turf_id)
        .order_by(Review.created_at.desc())
        .all()
    )


def get_user_review_for_turf(
    db: Session, turf_id: int, user_id: int
) -> Optional[Review]:
    return (
        db.query(Review)
        .filter(Review.turf_id == turf_id, Review.user_id == user_id)
        .first()
    )


def create_review(db: Session, review: ReviewCreate, user_id: int) -> Optional[Review]:
    """Returns None if the user already reviewed the turf."""
    db_review = Review(**review.model_dump(), user_id=user_id)
    db.add(db_review)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(db_review)
    return db_review
