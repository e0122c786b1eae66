from pydantic import BaseModel, validator
from typing import Optional
from datetime import datetime

from app.utils.time_utils import parse_time_to_minutes


def _validate_time(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if parse_time_to_minutes(v) == -1:
        raise ValueError("Time must use the HH:MM format between 00:00 and 24:00")
    return v


class TurfBase(BaseModel):
    name: str
    description: str = ""
    sport_type: str
    location: str
    price: int  # per hour, smallest currency unit
    image_url: Optional[str] = None
    available_from: str = "06:00"
    available_to: str = "22:00"

    @validator("price")
    def validate_price(cls, v):
        if v < 0:
            raise ValueError("Price cannot be negative")
        return v

    @validator("available_from", "available_to")
    def validate_times(cls, v):
        return _validate_time(v)

    @validator("available_to")
    def validate_window(cls, v, values):
        start = values.get("available_from")
        if start is not None and parse_time_to_minutes(v) <= parse_time_to_minutes(
            start
        ):
            raise ValueError("available_to must be later than available_from")
        return v


class TurfCreate(TurfBase):
    pass


class TurfUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    sport_type: Optional[str] = None
    location: Optional[str] = None
    price: Optional[int] = None
    image_url: Optional[str] = None
    available_from: Optional[str] = None
    available_to: Optional[str] = None

    @validator("price")
    def validate_price(cls, v):
        if v is not None and v < 0:
            raise ValueError("Price cannot be negative")
        return v

    @validator("available_from", "available_to")
    def validate_times(cls, v):
        return _validate_time(v)


class TurfInDB(TurfBase):
    id: int
    owner_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class TurfResponse(TurfInDB):
    pass
