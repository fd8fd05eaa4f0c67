"""API router aggregator."""
from fastapi import APIRouter

from taskboard.api.routes import auth, health, reports, tasks

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(tasks.router)
api_router.include_router(reports.router)

__all__ = ["api_router"]
