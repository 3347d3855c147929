from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.encrypt_service import EncryptService, encrypt_service
from app.services.post_service import PostService


class CursorParams:
    """
    Reusable FastAPI dependency that parses the keyset pagination cursor.

    Usage in a router::

        @router.get("/posts")
        async def list_posts(cursor: CursorParams = Depends()):
            ...

    Attributes
    ----------
    last_id:
        Id of the oldest post the client already holds (``?lastId=``).
        ``None`` requests the first page.
    """

    def __init__(
        self,
        last_id: int | None = Query(
            None,
            alias="lastId",
            ge=1,
            description="Id of the last post already received; omit for the first page.",
        ),
    ) -> None:
        self.last_id = last_id


def get_encrypt_service() -> EncryptService:
    return encrypt_service


def get_post_service(
    db: AsyncSession = Depends(get_db),
    encrypt: EncryptService = Depends(get_encrypt_service),
) -> PostService:
    return PostService(db, encrypt)
