"""Authentication endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import get_db, get_token_signer
from taskboard.core.security import TokenSigner
from taskboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from taskboard.schemas.user import UserRead
from taskboard.services.users import login_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    session: AsyncSession = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthResponse:
    user, token = await register_user(session, signer, payload)
    await session.commit()
    return AuthResponse(message="User registered successfully", user=UserRead.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthResponse:
    user, token = await login_user(session, signer, payload)
    return AuthResponse(message="Login successful", user=UserRead.model_validate(user), token=token)
