"""
Use case: Check a user's credentials.

Input: LoginUserCommand (email, password)
Output: UserResult
Side effects: None. No token or session is issued.
Failure cases: DomainError(BadRequest) "Invalid Credentials", identical
for an unknown email and for a wrong password. Both paths run one
password verification so their timing matches too.
"""

import logging

from authapi.application.auth.dtos import LoginUserCommand, UserResult
from authapi.application.auth.register_user import to_result
from authapi.domain.auth.errors import invalid_credentials
from authapi.domain.auth.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Verifies an email/password pair against the stored bcrypt hash."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    async def execute(self, command: LoginUserCommand) -> UserResult:
        user = await self._users.find_by_email(command.email)
        if user is None:
            await self._hasher.verify(command.password, self._hasher.decoy_hash)
            raise invalid_credentials()

        if not await self._hasher.verify(command.password, user.password_hash):
            raise invalid_credentials()

        logger.info("User id=%s logged in", user.id)
        return to_result(user)
