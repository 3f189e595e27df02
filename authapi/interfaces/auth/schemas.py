"""
Schemas for the auth routes.

Request payloads are described declaratively and checked by the
validation pipeline before a handler runs. Responses are pydantic
models; they never include a password or its hash.
"""

from datetime import datetime

from authapi.interfaces.schemas import ApiModel
from authapi.shared.validation import Email, Field, Schema, String, min_length

INVALID_EMAIL = "Invalid email address"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = "Password must be at least 6 characters"
FULL_NAME_REQUIRED = "Full name is required"
MIN_PASSWORD_LENGTH = 6

LoginSchema = Schema(
    Field("email", Email(), message=INVALID_EMAIL),
    Field(
        "password",
        String(trim=False),
        message=PASSWORD_REQUIRED,
        checks=(min_length(1, PASSWORD_REQUIRED),),
    ),
)

RegisterSchema = Schema(
    Field("email", Email(), message=INVALID_EMAIL),
    Field(
        "password",
        String(trim=False),
        message=PASSWORD_TOO_SHORT,
        checks=(min_length(MIN_PASSWORD_LENGTH, PASSWORD_TOO_SHORT),),
    ),
    Field(
        "fullName",
        String(),
        message=FULL_NAME_REQUIRED,
        checks=(min_length(1, FULL_NAME_REQUIRED),),
    ),
)


class UserItem(ApiModel):
    """Public view of a user."""

    id: str
    email: str
    full_name: str
    role: str
    created_at: datetime


class UserData(ApiModel):
    user: UserItem


class AuthResponse(ApiModel):
    """Response schema for register and login."""

    message: str
    success: bool = True
    data: UserData
