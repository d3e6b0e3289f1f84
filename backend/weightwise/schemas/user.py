from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
import uuid


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    avatar: Optional[str] = None
    height: float = Field(..., gt=0, le=120, description="Height in inches")
    current_weight: float = Field(..., gt=0, le=1500, description="Weight in lbs")
    target_weight: float = Field(..., gt=0, le=1500, description="Weight in lbs")


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    avatar: Optional[str] = None
    height: Optional[float] = Field(default=None, gt=0, le=120)
    current_weight: Optional[float] = Field(default=None, gt=0, le=1500)
    target_weight: Optional[float] = Field(default=None, gt=0, le=1500)


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    name: str
    avatar: Optional[str]
    height: float
    current_weight: float
    target_weight: float
    date_joined: datetime

    class Config:
        from_attributes = True
