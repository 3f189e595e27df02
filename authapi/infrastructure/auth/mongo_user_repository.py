"""
Adapter: MongoDB user storage.

Implements UserRepository on a motor client. The email field carries a
unique index, so a concurrent duplicate registration that slips past the
use case's lookup still surfaces as "Email already exists".
"""

import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError
from pymongo.server_api import ServerApi

from authapi.domain.auth.entities import NewUser, Role, User
from authapi.domain.auth.errors import email_taken
from authapi.domain.auth.ports import UserRepository

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


def _to_document(user: User) -> dict[str, Any]:
    return {
        "_id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "password": user.password_hash,
        "role": user.role.value,
        "created_at": user.created_at,
    }


def _from_document(doc: dict[str, Any]) -> User:
    return User(
        id=str(doc["_id"]),
        email=doc["email"],
        full_name=doc["full_name"],
        password_hash=doc["password"],
        role=Role(doc.get("role", Role.USER.value)),
        created_at=doc["created_at"],
    )


class MongoUserRepository(UserRepository):
    """Concrete adapter storing users in a MongoDB collection.

    Args:
        uri: MongoDB connection string.
        db_name: Database holding the users collection.
        app_name: Client application name reported to the server.
    """

    def __init__(self, uri: str, db_name: str, app_name: str) -> None:
        self._uri = uri
        self._db_name = db_name
        self._app_name = app_name
        self._client: Optional[AsyncIOMotorClient] = None

    @property
    def _users(self):
        if self._client is None:
            raise RuntimeError("MongoUserRepository used before connect()")
        return self._client[self._db_name][USERS_COLLECTION]

    async def connect(self) -> None:
        """Open the client, check the server answers and ensure indexes."""
        self._client = AsyncIOMotorClient(
            self._uri,
            appname=self._app_name,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            tz_aware=True,
        )
        await self._client.admin.command("ping")
        await self._users.create_index([("email", ASCENDING)], unique=True)
        logger.info(
            "Connected to the database successfully (db=%s)", self._db_name
        )

    async def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        logger.info("Disconnected from the database successfully")

    async def find_by_email(self, email: str) -> Optional[User]:
        doc = await self._users.find_one({"email": email})
        if not doc:
            return None
        return _from_document(doc)

    async def create(self, new_user: NewUser) -> User:
        user = User(
            email=new_user.email,
            full_name=new_user.full_name,
            password_hash=new_user.password_hash,
            role=new_user.role,
        )
        try:
            await self._users.insert_one(_to_document(user))
        except DuplicateKeyError as exc:
            raise email_taken() from exc
        return user
