"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import Field

from taskboard.models.user import UserRole
from taskboard.schemas.base import CamelModel
from taskboard.schemas.user import UserRead

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PASSWORD_MIN_LENGTH = 6


class RegisterRequest(CamelModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)
    role: UserRole = UserRole.USER


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AuthResponse(CamelModel):
    message: str
    user: UserRead
    token: str
