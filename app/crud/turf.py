from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.turf import Turf
from app.schemas.turf import TurfCreate, TurfUpdate


def get_turf(db: Session, turf_id: int) -> Optional[Turf]:
    return db.query(Turf).filter(Turf.id == turf_id).first()


def get_turfs(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    sport_type: Optional[str] = None,
    location: Optional[str] = None,
    max_price: Optional[int] = None,
) -> List[Turf]:
    query = db.query(Turf)

    if sport_type:
        query = query.filter(Turf.sport_type == sport_type)
    if location:
        query = query.filter(Turf.location.ilike(f"%{location}%"))
    if max_price is not None:
        query = query.filter(Turf.price <= max_price)

    return query.order_by(Turf.id).offset(skip).limit(limit).all()


def get_turfs_by_owner(db: Session, owner_id: int) -> List[Turf]:
    return db.query(Turf).filter(Turf.owner_id == owner_id).order_by(Turf.id).all()


def create_turf(db: Session, turf: TurfCreate, owner_id: int) -> Turf:
    db_turf = Turf(**turf.model_dump(), owner_id=owner_id)
    db.add(db_turf)
    db.commit()
    db.refresh(db_turf)
    return db_turf


def update_turf(db: Session, turf_id: int, turf: TurfUpdate) -> Optional[Turf]:
    db_turf = get_turf(db, turf_id)
    if not db_turf:
        return None

    update_data = turf.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_turf, field, value)

    db.commit()
    db.refresh(db_turf)
    return db_turf


def delete_turf(db: Session, turf_id: int) -> bool:
    db_turf = get_turf(db, turf_id)
    if not db_turf:
        return False

    db.delete(db_turf)
    db.commit()
    return True
