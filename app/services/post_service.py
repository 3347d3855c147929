"""
Post service: business logic for the anonymous board.

Design notes
------------
- Every read and write goes through ``_get_active_post`` or the listing
  query, both of which filter ``is_deleted = false``; soft-deleted rows
  are invisible to every operation.
- Listing uses keyset pagination on ``id``: the client passes the id of
  the oldest post it already has and receives the next
  ``settings.DEFAULT_PAGE_SIZE`` older posts.
- Passwords are hashed by the injected ``EncryptService`` and never
  leave this module; ``_post_to_dict`` is the only serialiser.
- Methods flush but do not commit; the transaction boundary is owned by
  the ``get_db`` dependency in the router layer.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models import Post
from app.schemas import CursorPage, PostCreate, PostPasswordCheck, PostUpdate
from app.services.encrypt_service import EncryptService

logger = logging.getLogger(__name__)


class PostNotFoundError(Exception):
    """Raised when a post does not exist or has been soft-deleted."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _post_to_dict(post: Post) -> dict:
    """Serialise a Post to its public view (no password hash)."""
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "created_at": post.created_at,
    }


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class PostService:
    def __init__(self, db: AsyncSession, encrypt_service: EncryptService) -> None:
        self.db = db
        self.encrypt_service = encrypt_service

    async def _get_active_post(self, post_id: int) -> Post:
        result = await self.db.execute(
            select(Post).where(Post.id == post_id, Post.is_deleted.is_(False))
        )
        post = result.scalar_one_or_none()
        if post is None:
            logger.debug("Post %d not found or deleted", post_id)
            raise PostNotFoundError(post_id)
        return post

    async def create(self, data: PostCreate) -> dict:
        """Persist a new post with a hashed password and return its public view."""
        hashed_password = await self.encrypt_service.hash(data.password)

        post = Post(
            title=data.title,
            content=data.content,
            password=hashed_password,
        )
        self.db.add(post)
        await self.db.flush()
        await self.db.refresh(post)

        logger.info("Created post %d", post.id)
        return _post_to_dict(post)

    async def check_password(self, data: PostPasswordCheck, post_id: int) -> bool:
        """
        Return whether *data.password* matches the stored hash.

        Raises PostNotFoundError for a missing or soft-deleted post so that
        callers can tell "no such post" apart from a wrong password.
        """
        post = await self._get_active_post(post_id)
        return await self.encrypt_service.compare(data.password, post.password)

    async def find(self, last_id: int | None = None) -> CursorPage:
        """
        Return the next page of non-deleted posts, newest first.

        When *last_id* is given only posts strictly older (``id < last_id``)
        are returned.  ``next_cursor`` is set when the page is full and more
        posts may follow.
        """
        page_size = settings.DEFAULT_PAGE_SIZE

        q = select(Post).where(Post.is_deleted.is_(False))
        if last_id:
            q = q.where(Post.id < last_id)
        q = q.order_by(Post.id.desc()).limit(page_size)

        result = await self.db.execute(q)
        posts = result.scalars().all()

        next_cursor = posts[-1].id if len(posts) == page_size else None
        return CursorPage(
            items=[_post_to_dict(p) for p in posts],
            next_cursor=next_cursor,
        )

    async def update(self, data: PostUpdate, post_id: int) -> dict:
        """
        Partially update a post and return its public view.

        Only truthy fields of *data* are applied; a new password is hashed
        before it is stored.
        """
        post = await self._get_active_post(post_id)

        if data.title:
            post.title = data.title
        if data.content:
            post.content = data.content
        if data.password:
            post.password = await self.encrypt_service.hash(data.password)

        await self.db.flush()
        logger.info("Updated post %d", post_id)
        return _post_to_dict(post)

    async def remove(self, post_id: int) -> None:
        """Soft-delete a post by setting its ``is_deleted`` flag."""
        post = await self._get_active_post(post_id)
        post.is_deleted = True
        await self.db.flush()
        logger.info("Soft-deleted post %d", post_id)
