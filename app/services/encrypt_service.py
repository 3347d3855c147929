"""
Encrypt service: password hashing collaborator for the post service.

Hashing is delegated to passlib's ``CryptContext``.  Both operations are
CPU-bound, so they run in a worker thread and are exposed as coroutines.
"""
import asyncio

from passlib.context import CryptContext

from app.config import settings


class EncryptService:
    def __init__(self, context: CryptContext | None = None) -> None:
        self._context = context or CryptContext(
            schemes=settings.PASSWORD_SCHEMES, deprecated="auto"
        )

    async def hash(self, plaintext: str) -> str:
        """Return a salted hash of *plaintext*."""
        return await asyncio.to_thread(self._context.hash, plaintext)

    async def compare(self, plaintext: str, hashed: str) -> bool:
        """
        Return True when *plaintext* matches *hashed*.

        A stored value that passlib cannot identify counts as a mismatch.
        """
        try:
            return await asyncio.to_thread(self._context.verify, plaintext, hashed)
        except ValueError:
            return False


# Module-level instance shared by request handlers.
encrypt_service = EncryptService()
