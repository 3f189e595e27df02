"""
Application context.

Holds the process-wide collaborators of one application instance:
settings, the user repository, the password hasher, the error sink and
the health clock. Built once by ``create_app``, attached to
``app.state.context`` and started/stopped by the application lifespan.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Optional

from fastapi import Request

from authapi.core.config import Settings
from authapi.domain.auth.ports import PasswordHasher, UserRepository
from authapi.infrastructure.auth.bcrypt_hasher import BcryptPasswordHasher
from authapi.infrastructure.auth.memory_user_repository import InMemoryUserRepository
from authapi.infrastructure.auth.mongo_user_repository import MongoUserRepository
from authapi.shared.logging import flush_logging

logger = logging.getLogger(__name__)

ERROR_LOGGER = "authapi.errors"


class HealthClock:
    """Wall clock that never goes backwards within one process."""

    def __init__(self) -> None:
        self._last: Optional[datetime] = None
        self._lock = Lock()

    def now(self) -> datetime:
        current = datetime.now(timezone.utc)
        with self._lock:
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
        return current


@dataclass
class AppContext:
    """Collaborators shared by every request of one application."""

    settings: Settings
    users: UserRepository
    hasher: PasswordHasher
    error_sink: Any = field(default_factory=lambda: logging.getLogger(ERROR_LOGGER))
    clock: HealthClock = field(default_factory=HealthClock)

    async def startup(self) -> None:
        """Connect the datastore.

        Raises:
            RuntimeError: MONGO_URI is missing in production.
        """
        if self.settings.is_production and not self.settings.mongo_uri:
            raise RuntimeError("MONGO_URI is not defined in the configuration")
        await self.users.connect()

    async def shutdown(self) -> None:
        """Close the datastore and flush log handlers."""
        try:
            await self.users.close()
        finally:
            flush_logging()


def build_user_repository(settings: Settings) -> UserRepository:
    """Pick the datastore adapter from configuration."""
    if settings.mongo_uri:
        return MongoUserRepository(
            uri=settings.mongo_uri,
            db_name=settings.mongo_db,
            app_name=settings.app_name,
        )
    logger.warning("MONGO_URI is not set; users are kept in memory only")
    return InMemoryUserRepository()


def build_context(settings: Settings) -> AppContext:
    """Build the context from settings with the default adapters."""
    return AppContext(
        settings=settings,
        users=build_user_repository(settings),
        hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
    )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the application context."""
    return request.app.state.context
