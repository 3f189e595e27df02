"""
Data Transfer Objects for the auth application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a new user.

    Attributes:
        email: Unique email address, already validated.
        password: Plaintext password, already validated.
        full_name: Display name of the user.
    """

    email: str
    password: str
    full_name: str


@dataclass(frozen=True)
class LoginUserCommand:
    """Input DTO for checking a user's credentials."""

    email: str
    password: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO describing a user. Never carries the password hash."""

    id: str
    email: str
    full_name: str
    role: str
    created_at: datetime
