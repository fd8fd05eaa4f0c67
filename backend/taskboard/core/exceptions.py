"""Error taxonomy shared by services, dependencies and routes."""
from __future__ import annotations

from fastapi import status


class TaskboardError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, errors: list[str] | None = None) -> None:
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)


class ValidationFailed(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class Unauthenticated(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class InvalidCredentials(Unauthenticated):
    default_message = "Invalid credentials"


class Forbidden(TaskboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class NotFound(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(TaskboardError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InvalidTokenError(ValueError):
    """Token signature or payload could not be verified."""


class TokenExpiredError(InvalidTokenError):
    """Token signature is valid but older than the configured lifetime."""


class MissingSecretKeyError(RuntimeError):
    """No signing key is configured."""


class ModelValidationError(ValueError):
    """A mapped attribute was assigned a value outside its allowed range."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))
