"""Visibility scope for read and report queries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from taskboard.models.user import UserRole


@dataclass(frozen=True)
class Owned:
    """Restrict queries to rows owned by ``user_id``."""

    user_id: int


@dataclass(frozen=True)
class Unrestricted:
    """No owner filter; every row is visible."""


Scope = Union[Owned, Unrestricted]


def scope_for(user_id: int, role: str) -> Scope:
    if role == UserRole.ADMIN.value:
        return Unrestricted()
    return Owned(user_id)
