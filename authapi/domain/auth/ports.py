"""
Port interfaces (ABCs) for the auth bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from authapi.domain.auth.entities import NewUser, User


class UserRepository(ABC):
    """Port for persisting and retrieving users keyed by a unique email."""

    async def connect(self) -> None:
        """Open the underlying connection. No-op for stores without one."""

    async def close(self) -> None:
        """Release the underlying connection. No-op for stores without one."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, new_user: NewUser) -> User:
        """Persist a new user and return it with its assigned identity.

        Raises:
            DomainError: BadRequest "Email already exists" when the
                unique email constraint is violated.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @property
    @abstractmethod
    def decoy_hash(self) -> str:
        """A valid hash at the configured cost that matches no real password.

        Verified against when no user exists, so unknown accounts cost as
        much to reject as wrong passwords.
        """
        raise NotImplementedError

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Return a salted hash of the plaintext password."""
        raise NotImplementedError

    @abstractmethod
    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True when the plaintext matches the stored hash."""
        raise NotImplementedError
