"""Schemas for aggregate task reports."""
from __future__ import annotations

from datetime import datetime

from taskboard.models.user import UserRole
from taskboard.schemas.base import CamelModel


class CompletionStats(CamelModel):
    total_tasks: int
    completed_tasks: int
    in_progress_tasks: int
    pending_tasks: int
    completion_rate: float


class TimeStats(CamelModel):
    total_time_spent: int
    average_time_per_task: float
    time_by_status: dict[str, int]


class CompletionReport(CamelModel):
    completion_stats: CompletionStats
    generated_at: datetime
    user_role: UserRole


class TimeReport(CamelModel):
    time_stats: TimeStats
    generated_at: datetime
    user_role: UserRole
