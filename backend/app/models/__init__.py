# VitalTrack Database Models
from app.models.user import User
from app.models.measurement_log import MeasurementLog

__all__ = [
    "User",
    "MeasurementLog",
]
