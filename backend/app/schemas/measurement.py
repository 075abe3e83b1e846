from pydantic import BaseModel, Field, computed_field
from datetime import date, datetime

from app.services.bmi_service import categorize
from app.utils.enums import BMICategory


class MeasurementCreate(BaseModel):
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    date: date


class MeasurementLogResponse(BaseModel):
    id: int
    user_id: str
    weight: float
    bmi: float
    date: date
    created_at: datetime

    @computed_field
    @property
    def category(self) -> BMICategory:
        return categorize(self.bmi)

    class Config:
        from_attributes = True


class MeasurementUpsertResponse(BaseModel):
    success: bool = True
    id: int
    date: date
    bmi: float
    category: BMICategory
