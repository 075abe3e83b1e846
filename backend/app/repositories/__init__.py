from app.repositories.base import UserRepository, MeasurementLogRepository
from app.repositories.users import SQLAlchemyUserRepository
from app.repositories.measurement_logs import SQLAlchemyMeasurementLogRepository

__all__ = [
    "UserRepository",
    "MeasurementLogRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyMeasurementLogRepository",
]
