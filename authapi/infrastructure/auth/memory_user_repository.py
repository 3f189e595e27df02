"""
Adapter: in-process user storage.

Implements UserRepository with a dict keyed by email. Used when no
MONGO_URI is configured and by the test suite.
"""

import asyncio
from typing import Optional

from authapi.domain.auth.entities import NewUser, User
from authapi.domain.auth.errors import email_taken
from authapi.domain.auth.ports import UserRepository


class InMemoryUserRepository(UserRepository):
    """Stores users in memory for the lifetime of the process."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get(email)

    async def create(self, new_user: NewUser) -> User:
        async with self._lock:
            if new_user.email in self._users:
                raise email_taken()
            user = User(
                email=new_user.email,
                full_name=new_user.full_name,
                password_hash=new_user.password_hash,
                role=new_user.role,
            )
            self._users[user.email] = user
        return user

    def __len__(self) -> int:
        return len(self._users)
