"""Service providers shared by the routers"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.integrations.google.client import GoogleOAuthClient
from app.repositories import SQLAlchemyUserRepository, SQLAlchemyMeasurementLogRepository
from app.services.identity_service import IdentityService
from app.services.measurement_service import MeasurementService
from app.services.user_service import UserService


_google_client = GoogleOAuthClient()


def get_google_client() -> GoogleOAuthClient:
    return _google_client


def get_identity_service(db: AsyncSession = Depends(get_db)) -> IdentityService:
    return IdentityService(SQLAlchemyUserRepository(db), SQLAlchemyMeasurementLogRepository(db))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SQLAlchemyUserRepository(db))


def get_measurement_service(db: AsyncSession = Depends(get_db)) -> MeasurementService:
    return MeasurementService(SQLAlchemyUserRepository(db), SQLAlchemyMeasurementLogRepository(db))
