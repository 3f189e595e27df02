"""
Use case: Register a new user.

Input: RegisterUserCommand (email, password, full_name)
Output: UserResult
Side effects: Persists one user with a hashed password.
Failure cases: DomainError(BadRequest) "Email already exists".
"""

import logging

from authapi.application.auth.dtos import RegisterUserCommand, UserResult
from authapi.domain.auth.entities import NewUser, Role, User
from authapi.domain.auth.errors import email_taken
from authapi.domain.auth.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


def to_result(user: User) -> UserResult:
    """Map a user entity to its public DTO, dropping the password hash."""
    return UserResult(
        id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=user.role.value,
        created_at=user.created_at,
    )


class RegisterUserUseCase:
    """Creates a user account when the email is not taken yet."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    async def execute(self, command: RegisterUserCommand) -> UserResult:
        """Run the registration use case.

        Raises:
            DomainError: BadRequest when the email is already registered.
        """
        if await self._users.find_by_email(command.email) is not None:
            raise email_taken()

        password_hash = await self._hasher.hash(command.password)
        user = await self._users.create(
            NewUser(
                email=command.email,
                full_name=command.full_name,
                password_hash=password_hash,
                role=Role.USER,
            )
        )
        logger.info("Registered user id=%s", user.id)
        return to_result(user)
