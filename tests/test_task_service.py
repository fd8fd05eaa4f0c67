# tests/test_task_service.py

from __future__ import annotations

import pytest

from taskboard.core.exceptions import ModelValidationError
from taskboard.core.scope import Owned, Unrestricted, scope_for
from taskboard.models.task import INT_MAX, Task, TaskStatus
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.services import tasks as task_service
from taskboard.services.tasks import TaskFilter, build_task_filters

from .helpers import add_user


def _new(title: str = "Task", description: str = "Description", **kwargs) -> TaskCreate:
    return TaskCreate(title=title, description=description, **kwargs)


def test_scope_for_roles() -> None:
    assert scope_for(3, "admin") == Unrestricted()
    assert scope_for(3, "user") == Owned(3)


def test_build_task_filters_only_includes_requested_predicates() -> None:
    assert build_task_filters(TaskFilter()) == []
    assert len(build_task_filters(TaskFilter(status=TaskStatus.PENDING))) == 1
    assert len(build_task_filters(TaskFilter(status=TaskStatus.PENDING, search="x"))) == 2
    assert build_task_filters(TaskFilter(search="")) == []


def test_model_rejects_out_of_range_values() -> None:
    with pytest.raises(ModelValidationError):
        Task(title="", description="d", user_id=1)
    with pytest.raises(ModelValidationError):
        Task(title="t" * 256, description="d", user_id=1)
    with pytest.raises(ModelValidationError):
        Task(title="t", description="d", user_id=1, time_spent=-1)
    with pytest.raises(ModelValidationError):
        Task(title="t", description="d", user_id=1, time_spent=INT_MAX + 1)


@pytest.mark.asyncio
async def test_create_task_applies_defaults(session) -> None:
    owner = await add_user(session, "owner@x.com")

    task = await task_service.create_task(session, owner.id, _new())

    assert task.id is not None
    assert task.status is TaskStatus.PENDING
    assert task.time_spent == 0
    assert task.user_id == owner.id


@pytest.mark.asyncio
async def test_list_paginates_newest_first(session) -> None:
    owner = await add_user(session, "owner@x.com")
    other = await add_user(session, "other@x.com")
    for i in range(25):
        await task_service.create_task(session, owner.id, _new(title=f"Task {i}"))
    await task_service.create_task(session, other.id, _new(title="Foreign"))

    first = await task_service.list_tasks(session, owner.id, TaskFilter(), page=1, limit=10)
    last = await task_service.list_tasks(session, owner.id, TaskFilter(), page=3, limit=10)

    assert first.total == 25
    assert first.total_pages == 3
    assert [task.title for task in first.tasks][:2] == ["Task 24", "Task 23"]
    assert len(last.tasks) == 5
    assert last.tasks[-1].title == "Task 0"


@pytest.mark.asyncio
async def test_list_filters_by_status_and_case_insensitive_search(session) -> None:
    owner = await add_user(session, "owner@x.com")
    await task_service.create_task(session, owner.id, _new(title="Write REPORT"))
    await task_service.create_task(session, owner.id, _new(title="Other", description="about the report"))
    await task_service.create_task(
        session, owner.id, _new(title="Report done", status=TaskStatus.COMPLETED)
    )
    await task_service.create_task(session, owner.id, _new(title="Unrelated"))

    searched = await task_service.list_tasks(session, owner.id, TaskFilter(search="report"))
    combined = await task_service.list_tasks(
        session, owner.id, TaskFilter(status=TaskStatus.COMPLETED, search="Report")
    )

    assert searched.total == 3
    assert [task.title for task in combined.tasks] == ["Report done"]


@pytest.mark.asyncio
async def test_search_matches_wildcards_literally(session) -> None:
    owner = await add_user(session, "owner@x.com")
    await task_service.create_task(session, owner.id, _new(title="100% done"))
    await task_service.create_task(session, owner.id, _new(title="1000 left"))

    result = await task_service.list_tasks(session, owner.id, TaskFilter(search="0%"))

    assert [task.title for task in result.tasks] == ["100% done"]


@pytest.mark.asyncio
async def test_get_task_respects_scope(session) -> None:
    owner = await add_user(session, "owner@x.com")
    stranger = await add_user(session, "stranger@x.com")
    task = await task_service.create_task(session, owner.id, _new())

    assert await task_service.get_task(session, task.id, Owned(stranger.id)) is None
    found = await task_service.get_task(session, task.id, Unrestricted())
    assert found is not None
    assert found.user.email == "owner@x.com"


@pytest.mark.asyncio
async def test_update_merges_supplied_fields_for_owner_only(session) -> None:
    owner = await add_user(session, "owner@x.com")
    admin = await add_user(session, "admin@x.com")
    task = await task_service.create_task(session, owner.id, _new(description="keep me"))

    denied = await task_service.update_task(session, task.id, admin.id, TaskUpdate(title="Hijacked"))
    updated = await task_service.update_task(
        session, task.id, owner.id, TaskUpdate(status=TaskStatus.IN_PROGRESS, time_spent=5)
    )

    assert denied is None
    assert updated is not None
    assert updated.title == "Task"
    assert updated.description == "keep me"
    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.time_spent == 5


@pytest.mark.asyncio
async def test_add_time_accumulates(session) -> None:
    owner = await add_user(session, "owner@x.com")
    task = await task_service.create_task(session, owner.id, _new())

    await task_service.add_time(session, task.id, owner.id, 30)
    task = await task_service.add_time(session, task.id, owner.id, 15)

    assert task is not None
    assert task.time_spent == 45
    assert await task_service.add_time(session, task.id, owner.id + 100, 5) is None


@pytest.mark.asyncio
async def test_delete_requires_ownership(session) -> None:
    owner = await add_user(session, "owner@x.com")
    stranger = await add_user(session, "stranger@x.com")
    task = await task_service.create_task(session, owner.id, _new())

    assert await task_service.delete_task(session, task.id, stranger.id) is False
    assert await task_service.delete_task(session, task.id, owner.id) is True
    assert await task_service.get_task(session, task.id, Unrestricted()) is None
