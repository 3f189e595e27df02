"""
FastAPI router for the auth bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by the validation pipeline.
Error mapping is handled by the centralized error boundary.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from authapi.application.auth.dtos import (
    LoginUserCommand,
    RegisterUserCommand,
    UserResult,
)
from authapi.application.auth.login_user import LoginUserUseCase
from authapi.application.auth.register_user import RegisterUserUseCase
from authapi.interfaces.auth.dependencies import (
    get_login_user_use_case,
    get_register_user_use_case,
)
from authapi.interfaces.auth.schemas import (
    AuthResponse,
    LoginSchema,
    RegisterSchema,
    UserData,
    UserItem,
)
from authapi.interfaces.schemas import ErrorResponse
from authapi.shared.validation import ValidationSource, validate

router = APIRouter(prefix="/auth", tags=["auth"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _auth_response(message: str, user: UserResult) -> AuthResponse:
    return AuthResponse(
        message=message,
        data=UserData(
            user=UserItem(
                id=user.id,
                email=user.email,
                full_name=user.full_name,
                role=user.role,
                created_at=user.created_at,
            )
        ),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses=ERROR_RESPONSES,
    summary="Register a new user",
)
async def register(
    payload: dict[str, Any] = Depends(validate(RegisterSchema, ValidationSource.BODY)),
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> AuthResponse:
    """Create an account. The email must not be registered yet."""
    user = await use_case.execute(
        RegisterUserCommand(
            email=payload["email"],
            password=payload["password"],
            full_name=payload["fullName"],
        )
    )
    return _auth_response("User registered successfully", user)


@router.post(
    "/login",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses=ERROR_RESPONSES,
    summary="Log a user in",
)
async def login(
    payload: dict[str, Any] = Depends(validate(LoginSchema, ValidationSource.BODY)),
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
) -> AuthResponse:
    """Check the credentials. No token or session is issued."""
    user = await use_case.execute(
        LoginUserCommand(email=payload["email"], password=payload["password"])
    )
    return _auth_response("User logged in successfully", user)
