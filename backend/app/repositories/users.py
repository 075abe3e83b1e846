import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError
from app.models.user import User
from app.repositories.dialect import upsert_insert


logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository:
    """UserRepository backed by an AsyncSession. Commit is left to the caller."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address"""
        result = await self.db.execute(
            select(User)
            .where(User.email == email)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def insert_if_absent(self, user_id: str, email: str, name: Optional[str]) -> bool:
        stmt = (
            upsert_insert(self.db, User.__table__)
            .values(id=user_id, email=email, name=name)
            .on_conflict_do_nothing()
        )
        result = await self.db.execute(stmt)
        return result.rowcount == 1

    async def reassign_id(self, old_id: str, new_id: str, name: Optional[str]) -> None:
        try:
            await self.db.execute(
                update(User)
                .where(User.id == old_id)
                .values(id=new_id, name=name)
                .execution_options(synchronize_session=False)
            )
        except IntegrityError as e:
            logger.error(f"Could not move user {old_id} to id {new_id}: {e.orig}")
            raise ConflictError(f"User id {new_id} is already taken") from e

    async def update_profile(
        self,
        user_id: str,
        height: Optional[float],
        age: Optional[int],
        gender: Optional[str],
        activity_level: Optional[str],
    ) -> bool:
        result = await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(
                height=height,
                age=age,
                gender=gender,
                activity_level=activity_level,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
