"""
Identity Service

Reconciles a claimed identity (Google profile or self-declared guest) with the
users table so that every email maps to exactly one canonical user id.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from app.exceptions import ConflictError, ValidationError
from app.models.user import User, is_guest_id
from app.repositories.base import UserRepository, MeasurementLogRepository
from app.utils.enums import IdentitySource


logger = logging.getLogger(__name__)

# A lost insert race re-runs the lookups once
MAX_RESOLVE_ATTEMPTS = 2


@dataclass(frozen=True)
class IdentityCandidate:
    """Identity attributes claimed by a login attempt"""
    id: str
    email: str
    name: Optional[str] = None

    @property
    def source(self) -> IdentitySource:
        return IdentitySource.guest if is_guest_id(self.id) else IdentitySource.google


def _outranks(candidate_id: str, stored_id: str) -> bool:
    """An external-provider id wins over a guest id; otherwise the newest claim wins."""
    return not (is_guest_id(candidate_id) and not is_guest_id(stored_id))


class IdentityService:
    """
    Produces one canonical User per email.

    Resolution order:
    1. A user stored under the candidate id is returned untouched.
    2. A user stored under the candidate email is re-keyed to the more
       authoritative of the two ids. Logs recorded under the old id move with it.
    3. Otherwise a new user is inserted.
    """

    def __init__(self, users: UserRepository, logs: MeasurementLogRepository):
        self.users = users
        self.logs = logs

    async def resolve(self, candidate: IdentityCandidate) -> User:
        candidate = self._normalize(candidate)

        for _ in range(MAX_RESOLVE_ATTEMPTS):
            user = await self.users.get_by_id(candidate.id)
            if user:
                return user

            user = await self.users.get_by_email(candidate.email)
            if user:
                return await self._merge(user, candidate)

            if await self.users.insert_if_absent(candidate.id, candidate.email, candidate.name):
                logger.info(f"Created {candidate.source.value} user {candidate.id}")
                return await self.users.get_by_id(candidate.id)

            # Someone inserted the same id or email between our lookup and insert
            logger.info(f"Insert race for {candidate.email}, retrying lookup")

        logger.error(f"Could not reconcile identity {candidate.id} <{candidate.email}>")
        raise ConflictError(f"Could not reconcile identity for {candidate.email}")

    async def resolve_external_identity(self, provider_id: str, email: str, name: Optional[str]) -> User:
        if is_guest_id(provider_id):
            raise ValidationError(f"Provider id {provider_id!r} uses the reserved guest prefix")
        return await self.resolve(IdentityCandidate(id=provider_id, email=email, name=name))

    async def resolve_guest_identity(self, guest_id: str, email: str, name: Optional[str]) -> User:
        if not is_guest_id(guest_id):
            raise ValidationError(f"Guest id {guest_id!r} must start with 'guest_'")
        return await self.resolve(IdentityCandidate(id=guest_id, email=email, name=name))

    async def _merge(self, user: User, candidate: IdentityCandidate) -> User:
        if not _outranks(candidate.id, user.id):
            logger.info(f"Guest login {candidate.id} mapped onto existing user {user.id}")
            return user

        old_id = user.id
        await self.users.reassign_id(old_id, candidate.id, candidate.name)
        moved = await self.logs.reassign_owner(old_id, candidate.id)
        logger.info(
            f"Re-keyed user {old_id} -> {candidate.id} ({candidate.source.value}), "
            f"moved {moved} measurement logs"
        )

        merged = await self.users.get_by_id(candidate.id)
        if merged is None:
            # The row was re-keyed or removed concurrently
            raise ConflictError(f"User {old_id} changed while being re-keyed")
        return merged

    @staticmethod
    def _normalize(candidate: IdentityCandidate) -> IdentityCandidate:
        user_id = (candidate.id or "").strip()
        email = (candidate.email or "").strip().lower()
        if not user_id:
            raise ValidationError("Identity id is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email {candidate.email!r}")
        name = candidate.name.strip() if candidate.name else None
        return IdentityCandidate(id=user_id, email=email, name=name or None)
