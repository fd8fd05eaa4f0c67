"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.config import Settings
from taskboard.core.exceptions import Forbidden, InvalidTokenError, Unauthenticated
from taskboard.core.scope import Scope, scope_for
from taskboard.core.security import TokenSigner
from taskboard.db.session import get_session
from taskboard.services.users import get_user_by_id


@dataclass(frozen=True)
class CurrentUser:
    """Identity taken from the claims of a verified access token."""

    id: int
    email: str
    role: str


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with get_session(request.app.state.session_factory) as session:
        yield session


def get_token_signer(settings: Settings = Depends(get_app_settings)) -> TokenSigner:
    return TokenSigner(settings.secret_key, settings.token_lifetime)


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if not header:
        return None
    parts = header.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> CurrentUser:
    token = _bearer_token(request)
    if not token:
        raise Unauthenticated("Access token required")

    try:
        claims = signer.decode(token)
    except InvalidTokenError as exc:
        raise Forbidden("Invalid or expired token") from exc

    user = await get_user_by_id(session, claims["id"])
    if not user:
        raise Unauthenticated("User no longer exists")

    request.state.user = CurrentUser(id=claims["id"], email=claims["email"], role=claims["role"])
    return request.state.user


def get_scope(current_user: CurrentUser = Depends(get_current_user)) -> Scope:
    return scope_for(current_user.id, current_user.role)


def require_roles(*roles: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Build a dependency that admits only identities holding one of ``roles``.

    It runs the authentication guard itself, so it can be listed on a route
    without ``get_current_user``.
    """
    allowed = {getattr(role, "value", role) for role in roles}

    async def _check_role(current_user: CurrentUser | None = Depends(get_current_user)) -> CurrentUser:
        if current_user is None or current_user.role not in allowed:
            raise Forbidden("Insufficient permissions")
        return current_user

    return _check_role
