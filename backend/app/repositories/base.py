"""Interfaces for the user and measurement log stores."""
import datetime as dt
from abc import abstractmethod
from typing import List, Optional, Protocol

from app.models.user import User
from app.models.measurement_log import MeasurementLog


class UserRepository(Protocol):
    """Repository for user persistence."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def insert_if_absent(self, user_id: str, email: str, name: Optional[str]) -> bool:
        """
        Atomically insert a user unless the id or email is already taken.

        Returns:
            True if a row was inserted, False if a conflicting row exists
        """
        ...

    @abstractmethod
    async def reassign_id(self, old_id: str, new_id: str, name: Optional[str]) -> None:
        """Rewrite a user's primary key and refresh its display name."""
        ...

    @abstractmethod
    async def update_profile(
        self,
        user_id: str,
        height: Optional[float],
        age: Optional[int],
        gender: Optional[str],
        activity_level: Optional[str],
    ) -> bool:
        """Returns False if the user does not exist."""
        ...


class MeasurementLogRepository(Protocol):
    """Repository for daily measurement logs."""

    @abstractmethod
    async def upsert(self, user_id: str, log_date: dt.date, weight: float, bmi: float) -> MeasurementLog:
        """Insert the day's log or overwrite weight/bmi of the existing one."""
        ...

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[MeasurementLog]:
        """All logs of a user, ascending by date."""
        ...

    @abstractmethod
    async def delete(self, log_id: int) -> bool:
        """Returns True if a row was removed."""
        ...

    @abstractmethod
    async def reassign_owner(self, old_user_id: str, new_user_id: str) -> int:
        """Move logs to a user's new canonical id. Returns the number of rows moved."""
        ...
