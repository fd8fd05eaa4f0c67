"""Reporting endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import CurrentUser, get_current_user, get_db, get_scope
from taskboard.core.scope import Scope
from taskboard.schemas.report import CompletionReport, TimeReport
from taskboard.services import reports as report_service

router = APIRouter(prefix="/report", tags=["reports"])


@router.get("", response_model=CompletionReport)
async def completion_report(
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
    scope: Scope = Depends(get_scope),
) -> CompletionReport:
    """Completion statistics; admins see every task, users only their own."""
    stats = await report_service.completion_stats(session, scope)
    return CompletionReport(
        completion_stats=stats,
        generated_at=datetime.now(timezone.utc),
        user_role=current_user.role,
    )


@router.get("/report-time", response_model=TimeReport)
async def time_report(
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
    scope: Scope = Depends(get_scope),
) -> TimeReport:
    stats = await report_service.time_stats(session, scope)
    return TimeReport(
        time_stats=stats,
        generated_at=datetime.now(timezone.utc),
        user_role=current_user.role,
    )
