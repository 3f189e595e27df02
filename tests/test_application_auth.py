"""
Tests for the auth application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic, not adapters.
"""

from unittest.mock import AsyncMock

import pytest

from authapi.application.auth.dtos import LoginUserCommand, RegisterUserCommand
from authapi.application.auth.login_user import LoginUserUseCase
from authapi.application.auth.register_user import RegisterUserUseCase
from authapi.domain.auth.entities import NewUser, Role, User
from authapi.domain.errors import DomainError, ErrorKind


def _user(**overrides) -> User:
    values = dict(
        email="ada@example.com",
        full_name="Ada Lovelace",
        password_hash="$2b$04$hash",
        role=Role.USER,
    )
    values.update(overrides)
    return User(**values)


@pytest.fixture
def users():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.create.side_effect = lambda new_user: _user(
        email=new_user.email,
        full_name=new_user.full_name,
        password_hash=new_user.password_hash,
    )
    return repo


@pytest.fixture
def hasher():
    mock = AsyncMock()
    mock.hash.return_value = "$2b$04$hashed"
    mock.verify.return_value = True
    mock.decoy_hash = "$2b$04$decoy"
    return mock


class TestRegisterUserUseCase:
    """Tests for the RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_registers_with_hashed_password(self, users, hasher) -> None:
        result = await RegisterUserUseCase(users, hasher).execute(
            RegisterUserCommand("ada@example.com", "secret1", "Ada Lovelace")
        )

        hasher.hash.assert_awaited_once_with("secret1")
        created: NewUser = users.create.await_args.args[0]
        assert created.password_hash == "$2b$04$hashed"
        assert created.role is Role.USER
        assert result.email == "ada@example.com"
        assert result.role == "USER"
        assert not hasattr(result, "password_hash")

    @pytest.mark.asyncio
    async def test_existing_email_raises(self, users, hasher) -> None:
        users.find_by_email.return_value = _user()

        with pytest.raises(DomainError) as excinfo:
            await RegisterUserUseCase(users, hasher).execute(
                RegisterUserCommand("ada@example.com", "secret1", "Ada")
            )

        assert excinfo.value.kind is ErrorKind.BAD_REQUEST
        assert excinfo.value.message == "Email already exists"
        users.create.assert_not_awaited()
        hasher.hash.assert_not_awaited()


class TestLoginUserUseCase:
    """Tests for the LoginUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, users, hasher) -> None:
        users.find_by_email.return_value = _user()

        result = await LoginUserUseCase(users, hasher).execute(
            LoginUserCommand("ada@example.com", "secret1")
        )

        hasher.verify.assert_awaited_once_with("secret1", "$2b$04$hash")
        assert result.full_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_unknown_email(self, users, hasher) -> None:
        with pytest.raises(DomainError) as excinfo:
            await LoginUserUseCase(users, hasher).execute(
                LoginUserCommand("ghost@example.com", "secret1")
            )
        assert excinfo.value.message == "Invalid Credentials"
        hasher.verify.assert_awaited_once_with("secret1", "$2b$04$decoy")

    @pytest.mark.asyncio
    async def test_wrong_password_matches_unknown_email(self, users, hasher) -> None:
        users.find_by_email.return_value = _user()
        hasher.verify.return_value = False

        with pytest.raises(DomainError) as wrong_password:
            await LoginUserUseCase(users, hasher).execute(
                LoginUserCommand("ada@example.com", "nope")
            )
        users.find_by_email.return_value = None
        with pytest.raises(DomainError) as unknown_email:
            await LoginUserUseCase(users, hasher).execute(
                LoginUserCommand("ghost@example.com", "nope")
            )

        assert (wrong_password.value.kind, wrong_password.value.message) == (
            unknown_email.value.kind,
            unknown_email.value.message,
        )
        assert hasher.verify.await_count == 2
