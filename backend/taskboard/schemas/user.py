"""Pydantic schemas for user operations."""
from __future__ import annotations

from datetime import datetime

from taskboard.models.user import UserRole
from taskboard.schemas.base import CamelModel


class UserRead(CamelModel):
    id: int
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
