from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
import uuid

from weightwise.utils.enums import GoalType, GoalDirection


class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    target_weight: float = Field(..., gt=0, le=1500)
    target_date: date
    type: GoalType = GoalType.monthly


class GoalUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    target_weight: Optional[float] = Field(default=None, gt=0, le=1500)
    target_date: Optional[date] = None
    type: Optional[GoalType] = None


class GoalResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    target_weight: float
    target_date: date
    type: GoalType
    is_active: bool
    start_weight: float
    direction: GoalDirection
    created_at: datetime

    class Config:
        from_attributes = True
