import logging
import math
from typing import Optional

from app.exceptions import NotFoundError, ValidationError
from app.models.user import User
from app.repositories.base import UserRepository
from app.utils.enums import Gender, ActivityLevel


logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    async def get_user(self, user_id: str) -> User:
        """Get a user by ID or raise NotFoundError"""
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def update_profile(
        self,
        user_id: str,
        height: Optional[float] = None,
        age: Optional[int] = None,
        gender: Optional[str] = None,
        activity_level: Optional[str] = None,
    ) -> User:
        """
        Replace the profile fields of a user in a single UPDATE.

        Fields passed as None are cleared. Setting ``height`` makes the user
        profile-complete.
        """
        if height is not None and not (math.isfinite(height) and height > 0):
            raise ValidationError(f"Height must be a positive number, got {height!r}")
        if age is not None and age < 0:
            raise ValidationError(f"Age must not be negative, got {age!r}")
        gender = _enum_value(Gender, gender, "gender")
        activity_level = _enum_value(ActivityLevel, activity_level, "activity level")

        updated = await self.users.update_profile(user_id, height, age, gender, activity_level)
        if not updated:
            raise NotFoundError(f"User {user_id} not found")

        logger.info(f"Updated profile of user {user_id}")
        return await self.get_user(user_id)


def _enum_value(enum_cls, value, label: str) -> Optional[str]:
    if value is None:
        return None
    try:
        return enum_cls(value).value
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {label} {value!r}, expected one of: {allowed}") from None
