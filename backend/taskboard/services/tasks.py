"""Service layer for task persistence."""
from __future__ import annotations

import math
from dataclasses import dataclass

from sqlalchemy import ColumnElement, Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.core.scope import Owned, Scope
from taskboard.models.task import Task, TaskStatus
from taskboard.schemas.task import TaskCreate, TaskUpdate

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_PAGE = 2**31 - 1


@dataclass(frozen=True)
class TaskFilter:
    """Optional predicates for task listings."""

    status: TaskStatus | None = None
    search: str | None = None


@dataclass(frozen=True)
class TaskPage:
    tasks: list[Task]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


def build_task_filters(task_filter: TaskFilter) -> list[ColumnElement[bool]]:
    """Translate a :class:`TaskFilter` into where-clauses over the tasks table."""
    clauses: list[ColumnElement[bool]] = []
    if task_filter.status is not None:
        clauses.append(Task.status == task_filter.status)
    if task_filter.search:
        clauses.append(
            or_(
                Task.title.icontains(task_filter.search, autoescape=True),
                Task.description.icontains(task_filter.search, autoescape=True),
            )
        )
    return clauses


def apply_scope(stmt: Select, scope: Scope) -> Select:
    if isinstance(scope, Owned):
        return stmt.where(Task.user_id == scope.user_id)
    return stmt


async def create_task(session: AsyncSession, owner_id: int, data: TaskCreate) -> Task:
    task = Task(
        title=data.title,
        description=data.description,
        status=data.status,
        time_spent=data.time_spent,
        user_id=owner_id,
    )
    session.add(task)
    await session.flush()
    await session.refresh(task)
    return task


async def list_tasks(
    session: AsyncSession,
    owner_id: int,
    task_filter: TaskFilter,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> TaskPage:
    clauses = [Task.user_id == owner_id, *build_task_filters(task_filter)]

    total = await session.scalar(select(func.count()).select_from(Task).where(*clauses))
    result = await session.execute(
        select(Task)
        .where(*clauses)
        .order_by(Task.created_at.desc(), Task.id.desc())
        .limit(limit)
        .offset((page - 1) * limit)
    )
    return TaskPage(tasks=list(result.scalars().all()), page=page, limit=limit, total=total or 0)


async def get_task(session: AsyncSession, task_id: int, scope: Scope) -> Task | None:
    stmt = select(Task).options(selectinload(Task.user)).where(Task.id == task_id)
    result = await session.execute(apply_scope(stmt, scope))
    return result.scalar_one_or_none()


async def _get_owned_task(session: AsyncSession, task_id: int, owner_id: int) -> Task | None:
    result = await session.execute(select(Task).where(Task.id == task_id, Task.user_id == owner_id))
    return result.scalar_one_or_none()


async def update_task(session: AsyncSession, task_id: int, owner_id: int, data: TaskUpdate) -> Task | None:
    task = await _get_owned_task(session, task_id, owner_id)
    if not task:
        return None

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(task, field, value)

    await session.flush()
    await session.refresh(task)
    return task


async def delete_task(session: AsyncSession, task_id: int, owner_id: int) -> bool:
    result = await session.execute(delete(Task).where(Task.id == task_id, Task.user_id == owner_id))
    await session.flush()
    return result.rowcount > 0


async def add_time(session: AsyncSession, task_id: int, owner_id: int, minutes: int) -> Task | None:
    """Add ``minutes`` to the accumulated time of an owned task."""
    task = await _get_owned_task(session, task_id, owner_id)
    if not task:
        return None

    task.time_spent = task.time_spent + minutes
    await session.flush()
    await session.refresh(task)
    return task
