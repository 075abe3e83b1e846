from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routers.deps import get_measurement_service
from app.schemas.measurement import MeasurementCreate, MeasurementLogResponse, MeasurementUpsertResponse
from app.schemas.user import SuccessResponse
from app.services.bmi_service import categorize
from app.services.measurement_service import MeasurementService


router = APIRouter()


@router.get("/{user_id}", response_model=List[MeasurementLogResponse])
async def list_logs(user_id: str, logs: MeasurementService = Depends(get_measurement_service)):
    """All measurements of a user, oldest first"""
    return await logs.list_for_user(user_id)


@router.post("/{user_id}", response_model=MeasurementUpsertResponse)
async def upsert_log(
    user_id: str,
    payload: MeasurementCreate,
    logs: MeasurementService = Depends(get_measurement_service),
    db: AsyncSession = Depends(get_db),
):
    """Record the day's weight, replacing an earlier entry for the same date"""
    log = await logs.upsert(user_id, payload.weight, payload.date)
    await db.commit()
    return MeasurementUpsertResponse(
        id=log.id,
        date=log.date,
        bmi=log.bmi,
        category=categorize(log.bmi),
    )


@router.delete("/{log_id}", response_model=SuccessResponse)
async def delete_log(
    log_id: int,
    logs: MeasurementService = Depends(get_measurement_service),
    db: AsyncSession = Depends(get_db),
):
    """Delete a measurement. Deleting an unknown id succeeds."""
    await logs.delete(log_id)
    await db.commit()
    return SuccessResponse()
