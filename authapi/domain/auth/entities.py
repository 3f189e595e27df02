"""
Domain entities for the auth bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class Role(Enum):
    """Authorization role stored with each user."""

    USER = "USER"
    ADMIN = "ADMIN"


def _new_id() -> str:
    return uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NewUser:
    """A user about to be persisted. The password is already hashed."""

    email: str
    full_name: str
    password_hash: str
    role: Role = Role.USER


@dataclass(frozen=True)
class User:
    """A registered user.

    ``email`` is unique across the datastore. ``password_hash`` must never
    leave the application layer.
    """

    email: str
    full_name: str
    password_hash: str
    role: Role = Role.USER
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utcnow)
