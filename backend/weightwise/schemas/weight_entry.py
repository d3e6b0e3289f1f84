from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
import uuid


class WeightEntryCreate(BaseModel):
    weight: float = Field(..., gt=0, le=1500, description="Weight in lbs")
    date: datetime
    calories: Optional[float] = Field(default=None, ge=0, le=20000)
    exercise: Optional[str] = Field(default=None, max_length=500)
    water_intake: Optional[float] = Field(default=None, ge=0, le=1000, description="Water in oz")
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def to_local_time(cls, v: datetime) -> datetime:
        """Entries are stored as naive local time; convert offset-aware input"""
        if v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v


class WeightEntryResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    weight: float
    date: datetime
    calories: Optional[float]
    exercise: Optional[str]
    water_intake: Optional[float]
    notes: Optional[str]

    class Config:
        from_attributes = True
