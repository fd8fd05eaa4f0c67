"""Database model for user tasks."""
from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from taskboard.core.exceptions import ModelValidationError
from taskboard.db.base import Base, utcnow

TITLE_MAX_LENGTH = 255
# 32-bit signed INTEGER, the narrowest column type among supported databases
INT_MAX = 2**31 - 1


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Task(Base):
    """A unit of work owned by exactly one user."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, name="task_status", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        default=TaskStatus.PENDING,
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    time_spent: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # minutes
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user: Mapped["User"] = relationship("User", back_populates="tasks")

    @validates("title")
    def _validate_title(self, _key: str, value: str) -> str:
        if value is not None and not 1 <= len(value) <= TITLE_MAX_LENGTH:
            raise ModelValidationError([f"Title must be between 1 and {TITLE_MAX_LENGTH} characters"])
        return value

    @validates("time_spent")
    def _validate_time_spent(self, _key: str, value: int) -> int:
        if value is not None and not 0 <= value <= INT_MAX:
            raise ModelValidationError([f"Time spent must be between 0 and {INT_MAX} minutes"])
        return value
