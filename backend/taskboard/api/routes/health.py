"""Service status endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from taskboard.core.config import Settings
from taskboard.core.dependencies import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


@router.get("/")
async def index(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {
        "message": "Task Management API",
        "documentation": "/docs",
        "health": "/health",
        "version": settings.version,
    }
