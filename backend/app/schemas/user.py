from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.utils.enums import Gender, ActivityLevel


class ProfileUpdate(BaseModel):
    height: Optional[float] = Field(default=None, gt=0, le=300, allow_inf_nan=False)
    age: Optional[int] = Field(default=None, ge=0, le=150)
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None


class UserResponse(BaseModel):
    id: str
    email: str
    name: Optional[str]
    height: Optional[float]
    age: Optional[int]
    gender: Optional[str]
    activity_level: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    success: bool = True
