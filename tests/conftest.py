# tests/conftest.py

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard import models  # noqa: F401
from taskboard.core.config import Settings
from taskboard.db.base import Base
from taskboard.db.session import create_engine, create_session_factory
from taskboard.main import create_app

from .helpers import make_settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def session(settings: Settings) -> AsyncIterator[AsyncSession]:
    """Session over a freshly created schema, for service-level tests."""
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = create_session_factory(engine)
    async with factory() as db_session:
        yield db_session
    await engine.dispose()
