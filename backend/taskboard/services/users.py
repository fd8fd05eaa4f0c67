"""User service functions for registration and authentication."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.exceptions import Conflict, InvalidCredentials
from taskboard.core.security import PasswordHasher, TokenSigner
from taskboard.models.user import User
from taskboard.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    return await session.get(User, user_id)


async def create_user(session: AsyncSession, user_in: RegisterRequest) -> User:
    password_hash = PasswordHasher.hash(user_in.password)
    user = User(email=user_in.email, password_hash=password_hash, role=user_in.role)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User | None:
    user = await get_user_by_email(session, email)
    if not user:
        return None
    if not PasswordHasher.verify(password, user.password_hash):
        return None
    return user


def issue_token(signer: TokenSigner, user: User) -> str:
    return signer.issue({"id": user.id, "email": user.email, "role": user.role.value})


async def register_user(session: AsyncSession, signer: TokenSigner, user_in: RegisterRequest) -> tuple[User, str]:
    """Create an account and return it together with a fresh access token."""
    if await get_user_by_email(session, user_in.email):
        raise Conflict("User already exists")

    user = await create_user(session, user_in)
    token = issue_token(signer, user)
    logger.info("Registered user %s with role %s", user.id, user.role.value)
    return user, token


async def login_user(session: AsyncSession, signer: TokenSigner, credentials: LoginRequest) -> tuple[User, str]:
    user = await authenticate_user(session, credentials.email, credentials.password)
    if not user:
        logger.info("Rejected login attempt")
        raise InvalidCredentials()
    return user, issue_token(signer, user)
