from datetime import datetime
from typing import Optional
from sqlalchemy import String, Float, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


GUEST_ID_PREFIX = "guest_"


class User(Base):
    __tablename__ = "users"

    # External-provider id (e.g. Google "sub") or a locally generated guest id
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    height: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # cm
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    activity_level: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )

    @property
    def is_guest(self) -> bool:
        return is_guest_id(self.id)

    @property
    def is_profile_complete(self) -> bool:
        return self.height is not None

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"


def is_guest_id(user_id: str) -> bool:
    return user_id.startswith(GUEST_ID_PREFIX)
