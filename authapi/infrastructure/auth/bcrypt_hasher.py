"""
Adapter: bcrypt password hashing.

Implements the PasswordHasher port. Hashing is CPU-bound and runs in
the threadpool so the event loop keeps serving other requests.
"""

import bcrypt
from starlette.concurrency import run_in_threadpool

from authapi.domain.auth.ports import PasswordHasher

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72
DECOY_PLAINTEXT = "decoy-password-never-issued"


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Concrete adapter hashing passwords with bcrypt.

    Args:
        rounds: bcrypt cost factor (log2 of the key expansion rounds).
    """

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds
        self._decoy_hash = self._hash_sync(DECOY_PLAINTEXT)

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def decoy_hash(self) -> str:
        return self._decoy_hash

    def _hash_sync(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("ascii")

    @staticmethod
    def _verify_sync(plaintext: str, hashed: str) -> bool:
        return bcrypt.checkpw(_encode(plaintext), hashed.encode("ascii"))

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self._hash_sync, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return await run_in_threadpool(self._verify_sync, plaintext, hashed)
