import datetime as dt
from datetime import datetime
from sqlalchemy import Integer, String, Date, DateTime, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class MeasurementLog(Base):
    __tablename__ = "measurement_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_measurement_logs_user_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", onupdate="CASCADE"),
        nullable=False,
        index=True
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # kg
    bmi: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<MeasurementLog(id={self.id}, date={self.date}, weight={self.weight}kg, bmi={self.bmi})>"
