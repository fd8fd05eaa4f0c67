"""Pydantic schemas for task operations."""
from __future__ import annotations

from datetime import datetime

from pydantic import Field

from taskboard.models.task import INT_MAX, TITLE_MAX_LENGTH, TaskStatus
from taskboard.schemas.base import CamelModel


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.PENDING
    time_spent: int = Field(default=0, ge=0, le=INT_MAX)


class TaskUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, min_length=1)
    status: TaskStatus | None = None
    time_spent: int | None = Field(default=None, ge=0, le=INT_MAX)


class TaskTimeUpdate(CamelModel):
    # Range is checked by the route so that 0 is rejected with the same message.
    time_spent: int | None = Field(default=None, le=INT_MAX)


class TaskRead(CamelModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    user_id: int
    time_spent: int
    created_at: datetime
    updated_at: datetime


class TaskOwner(CamelModel):
    email: str


class TaskDetail(TaskRead):
    user: TaskOwner


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class TaskListResponse(CamelModel):
    tasks: list[TaskRead]
    pagination: Pagination


class TaskResponse(CamelModel):
    message: str
    task: TaskRead


class MessageResponse(CamelModel):
    message: str
