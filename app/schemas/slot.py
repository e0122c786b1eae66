from pydantic import BaseModel
from datetime import date
from typing import List


class TimeSlot(BaseModel):
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM"


class SlotAvailability(TimeSlot):
    is_available: bool


class AvailableSlotsResponse(BaseModel):
    turf_id: int
    date: date
    slots: List[SlotAvailability]
    total_available: int
