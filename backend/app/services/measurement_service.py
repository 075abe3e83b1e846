"""
Measurement Service

Daily weight ingestion: one log per user per calendar day, BMI computed from
the user's stored height.
"""
import datetime as dt
import logging
import math
from typing import List, Union

from app.exceptions import NotFoundError, ProfileIncompleteError, ValidationError
from app.models.measurement_log import MeasurementLog
from app.repositories.base import UserRepository, MeasurementLogRepository
from app.services.bmi_service import calculate_bmi


logger = logging.getLogger(__name__)


def parse_log_date(value: Union[dt.date, str]) -> dt.date:
    """Accept a date or an ISO YYYY-MM-DD string; datetimes are truncated to their day"""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def validate_weight(value) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid weight {value!r}")
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid weight {value!r}") from None
    if not math.isfinite(weight) or weight <= 0:
        raise ValidationError(f"Weight must be a positive number, got {value!r}")
    return weight


class MeasurementService:
    def __init__(self, users: UserRepository, logs: MeasurementLogRepository):
        self.users = users
        self.logs = logs

    async def upsert(self, user_id: str, weight, log_date: Union[dt.date, str]) -> MeasurementLog:
        """
        Store the weight measured on ``log_date``.

        A second submission for the same day overwrites weight and BMI of the
        existing log and keeps its id.

        Raises:
            ValidationError: weight or date malformed (store untouched)
            NotFoundError: unknown user
            ProfileIncompleteError: user has no height yet
        """
        weight = validate_weight(weight)
        log_date = parse_log_date(log_date)

        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found. Please log in again.")
        if not user.is_profile_complete:
            raise ProfileIncompleteError(f"User {user_id} must set a height before logging weight")

        bmi = calculate_bmi(weight, user.height)
        log = await self.logs.upsert(user_id, log_date, weight, bmi)
        logger.info(f"Stored log {log.id} for user {user_id} on {log_date}: {weight}kg, BMI {bmi}")
        return log

    async def list_for_user(self, user_id: str) -> List[MeasurementLog]:
        """All logs of the user, oldest first; the last entry is the latest measurement"""
        return await self.logs.list_for_user(user_id)

    async def delete(self, log_id: int) -> None:
        """Delete a log by id. Unknown ids are ignored."""
        if await self.logs.delete(log_id):
            logger.info(f"Deleted measurement log {log_id}")
        else:
            logger.debug(f"Measurement log {log_id} already absent")
