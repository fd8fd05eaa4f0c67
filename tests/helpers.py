# tests/helpers.py

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.config import Settings
from taskboard.models.user import User, UserRole

DEFAULT_PASSWORD = "secret1"


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "secret_key": "test-secret",
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}",
        "environment": "test",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


async def add_user(session: AsyncSession, email: str, role: UserRole = UserRole.USER) -> User:
    # Hash is never checked by service tests; skip bcrypt for speed.
    user = User(email=email, password_hash="not-a-hash", role=role)
    session.add(user)
    await session.flush()
    return user


def register(client: TestClient, email: str, password: str = DEFAULT_PASSWORD, role: str = "user") -> str:
    response = client.post("/auth/register", json={"email": email, "password": password, "role": role})
    assert response.status_code == 201, response.text
    return response.json()["token"]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_task(client: TestClient, token: str, **fields) -> dict:
    payload = {"title": "Task", "description": "Description"}
    payload.update(fields)
    response = client.post("/tasks", json=payload, headers=auth(token))
    assert response.status_code == 201, response.text
    return response.json()["task"]
