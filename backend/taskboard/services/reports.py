"""Aggregate statistics over tasks."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.scope import Scope
from taskboard.models.task import Task, TaskStatus
from taskboard.schemas.report import CompletionStats, TimeStats
from taskboard.services.tasks import apply_scope


async def _count(session: AsyncSession, scope: Scope, status: TaskStatus | None = None) -> int:
    stmt = select(func.count()).select_from(Task)
    if status is not None:
        stmt = stmt.where(Task.status == status)
    return await session.scalar(apply_scope(stmt, scope)) or 0


async def completion_stats(session: AsyncSession, scope: Scope) -> CompletionStats:
    total = await _count(session, scope)
    completed = await _count(session, scope, TaskStatus.COMPLETED)
    in_progress = await _count(session, scope, TaskStatus.IN_PROGRESS)
    pending = await _count(session, scope, TaskStatus.PENDING)

    rate = completed / total * 100 if total > 0 else 0
    return CompletionStats(
        total_tasks=total,
        completed_tasks=completed,
        in_progress_tasks=in_progress,
        pending_tasks=pending,
        completion_rate=round(rate, 2),
    )


async def time_stats(session: AsyncSession, scope: Scope) -> TimeStats:
    result = await session.execute(apply_scope(select(Task.status, Task.time_spent), scope))
    rows = result.all()

    total = sum(time_spent for _, time_spent in rows)
    average = total / len(rows) if rows else 0

    by_status: dict[str, int] = {}
    for status, time_spent in rows:
        by_status[status.value] = by_status.get(status.value, 0) + time_spent

    return TimeStats(
        total_time_spent=total,
        average_time_per_task=round(average, 2),
        time_by_status=by_status,
    )
