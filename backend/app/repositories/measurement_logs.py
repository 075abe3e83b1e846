import datetime as dt
import logging
from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError
from app.models.measurement_log import MeasurementLog
from app.repositories.dialect import upsert_insert


logger = logging.getLogger(__name__)


class SQLAlchemyMeasurementLogRepository:
    """
    MeasurementLogRepository backed by an AsyncSession.

    One row per (user_id, date) is guaranteed by the uq_measurement_logs_user_date
    constraint; upsert is a single INSERT ... ON CONFLICT DO UPDATE statement so
    concurrent submissions for the same day cannot create a second row.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def upsert(self, user_id: str, log_date: dt.date, weight: float, bmi: float) -> MeasurementLog:
        stmt = upsert_insert(self.db, MeasurementLog.__table__).values(
            user_id=user_id,
            date=log_date,
            weight=weight,
            bmi=bmi,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "date"],
            set_={"weight": stmt.excluded.weight, "bmi": stmt.excluded.bmi},
        )
        await self.db.execute(stmt)

        result = await self.db.execute(
            select(MeasurementLog)
            .where(
                MeasurementLog.user_id == user_id,
                MeasurementLog.date == log_date,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def list_for_user(self, user_id: str) -> List[MeasurementLog]:
        result = await self.db.execute(
            select(MeasurementLog)
            .where(MeasurementLog.user_id == user_id)
            .order_by(MeasurementLog.date.asc(), MeasurementLog.id.asc())
        )
        return list(result.scalars().all())

    async def delete(self, log_id: int) -> bool:
        result = await self.db.execute(
            delete(MeasurementLog)
            .where(MeasurementLog.id == log_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def reassign_owner(self, old_user_id: str, new_user_id: str) -> int:
        try:
            result = await self.db.execute(
                update(MeasurementLog)
                .where(MeasurementLog.user_id == old_user_id)
                .values(user_id=new_user_id)
                .execution_options(synchronize_session=False)
            )
        except IntegrityError as e:
            logger.error(f"Could not move logs of {old_user_id} to {new_user_id}: {e.orig}")
            raise ConflictError(f"Measurement logs of {old_user_id} clash with {new_user_id}") from e
        return result.rowcount
