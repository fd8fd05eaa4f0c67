"""Task management endpoints."""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import CurrentUser, get_current_user, get_db, get_scope
from taskboard.core.exceptions import NotFound, ValidationFailed
from taskboard.core.scope import Scope
from taskboard.models.task import INT_MAX, TaskStatus
from taskboard.schemas.task import (
    MessageResponse,
    Pagination,
    TaskCreate,
    TaskDetail,
    TaskListResponse,
    TaskRead,
    TaskResponse,
    TaskTimeUpdate,
    TaskUpdate,
)
from taskboard.services import tasks as task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])

TaskId = Annotated[int, Path(ge=1, le=INT_MAX, description="Task identifier")]


def _not_found() -> NotFound:
    return NotFound("Task not found")


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreate,
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    task = await task_service.create_task(session, current_user.id, payload)
    await session.commit()
    return TaskResponse(message="Task created successfully", task=TaskRead.model_validate(task))


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    page: int = Query(task_service.DEFAULT_PAGE, ge=1, le=task_service.MAX_PAGE),
    limit: int = Query(task_service.DEFAULT_LIMIT, ge=1, le=task_service.MAX_LIMIT),
    status_filter: TaskStatus | None = Query(None, alias="status"),
    search: str | None = Query(None),
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskListResponse:
    result = await task_service.list_tasks(
        session,
        current_user.id,
        task_service.TaskFilter(status=status_filter, search=search),
        page=page,
        limit=limit,
    )
    return TaskListResponse(
        tasks=[TaskRead.model_validate(task) for task in result.tasks],
        pagination=Pagination(page=result.page, limit=result.limit, total=result.total, total_pages=result.total_pages),
    )


@router.get("/{task_id}", response_model=TaskDetail)
async def get_task(
    task_id: TaskId,
    session: AsyncSession = Depends(get_db),
    scope: Scope = Depends(get_scope),
) -> TaskDetail:
    task = await task_service.get_task(session, task_id, scope)
    if not task:
        raise _not_found()
    return TaskDetail.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    payload: TaskUpdate,
    task_id: TaskId,
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    task = await task_service.update_task(session, task_id, current_user.id, payload)
    if not task:
        raise _not_found()
    await session.commit()
    return TaskResponse(message="Task updated successfully", task=TaskRead.model_validate(task))


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: TaskId,
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    deleted = await task_service.delete_task(session, task_id, current_user.id)
    if not deleted:
        raise _not_found()
    await session.commit()
    return MessageResponse(message="Task deleted successfully")


@router.put("/{task_id}/time", response_model=TaskResponse)
async def add_task_time(
    payload: TaskTimeUpdate,
    task_id: TaskId,
    session: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    # 0 is rejected too
    if not payload.time_spent or payload.time_spent < 0:
        raise ValidationFailed("Time spent must be a non-negative number")

    task = await task_service.add_time(session, task_id, current_user.id, payload.time_spent)
    if not task:
        raise _not_found()
    await session.commit()
    return TaskResponse(message="Time updated successfully", task=TaskRead.model_validate(task))
