"""Security helpers for password hashing and bearer token signing."""
from __future__ import annotations

from datetime import timedelta
from typing import Any

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

from .exceptions import InvalidTokenError, MissingSecretKeyError, TokenExpiredError

_password_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=12)

CLAIM_KEYS = ("id", "email", "role")


class PasswordHasher:
    """Hash and verify user passwords using bcrypt."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)


class TokenSigner:
    """Sign and verify time-limited bearer tokens carrying user claims."""

    def __init__(self, secret_key: str | None, lifetime: timedelta, salt: str = "taskboard-access") -> None:
        self._secret_key = secret_key
        self._salt = salt
        self.lifetime = lifetime

    def _serializer(self) -> URLSafeTimedSerializer:
        if not self._secret_key:
            raise MissingSecretKeyError("TASKBOARD_SECRET_KEY is not defined in environment variables")
        return URLSafeTimedSerializer(self._secret_key, salt=self._salt)

    def issue(self, claims: dict[str, Any]) -> str:
        payload = {key: claims[key] for key in CLAIM_KEYS}
        return self._serializer().dumps(payload)

    def decode(self, token: str) -> dict[str, Any]:
        serializer = self._serializer()
        try:
            payload = serializer.loads(token, max_age=self.lifetime.total_seconds())
        except SignatureExpired as exc:
            raise TokenExpiredError("Token expired") from exc
        except BadData as exc:
            raise InvalidTokenError("Invalid token") from exc

        if not isinstance(payload, dict) or any(key not in payload for key in CLAIM_KEYS):
            raise InvalidTokenError("Invalid token")
        return payload
