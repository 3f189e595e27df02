"""
Dependency injection for the auth bounded context.

Provides FastAPI dependency functions that wire the adapters held by
the application context into use cases via constructor injection.
"""

from fastapi import Depends

from authapi.application.auth.login_user import LoginUserUseCase
from authapi.application.auth.register_user import RegisterUserUseCase
from authapi.core.context import AppContext, get_context


def get_register_user_use_case(
    context: AppContext = Depends(get_context),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(users=context.users, hasher=context.hasher)


def get_login_user_use_case(
    context: AppContext = Depends(get_context),
) -> LoginUserUseCase:
    """Build LoginUserUseCase with its infrastructure dependencies."""
    return LoginUserUseCase(users=context.users, hasher=context.hasher)
