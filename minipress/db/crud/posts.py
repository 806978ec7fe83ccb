"""CRUD operations for posts."""

import uuid
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.db.crud.base import storage_errors
from minipress.exceptions import NotFoundError
from minipress.models.post import Post
from minipress.models.schemas import PostRequest
from minipress.utils.text import make_excerpt, slugify


async def get_posts(db: AsyncSession) -> Sequence[Post]:
    """All posts, oldest first."""
    async with storage_errors(db, "read all posts"):
        result = await db.execute(select(Post).order_by(Post.created_at))
        return result.scalars().all()


async def get_post(db: AsyncSession, post_id: uuid.UUID) -> Post:
    """Get a post by ID, raising NotFoundError if absent."""
    async with storage_errors(db, "read post"):
        result = await db.execute(select(Post).where(Post.id == post_id))
        post = result.scalar_one_or_none()
    if not post:
        raise NotFoundError("Post not found")
    return post


async def create_post(db: AsyncSession, user_id: uuid.UUID, data: PostRequest) -> Post:
    """Create a post owned by ``user_id``.

    Insert and read-back run in one transaction, committed together.
    """
    post = Post(
        user_id=user_id,
        title=data.title,
        slug=slugify(data.title) or "untitled",
        excerpt=make_excerpt(data.content),
        content=data.content,
    )
    async with storage_errors(db, "create post"):
        db.add(post)
        await db.flush()
        await db.refresh(post)
        await db.commit()
    return post


async def update_post(db: AsyncSession, post_id: uuid.UUID, data: PostRequest) -> Post:
    """Update title and content.

    The slug is left alone so existing links keep working; the excerpt
    follows the new content.
    """
    post = await get_post(db, post_id)
    post.title = data.title
    post.content = data.content
    post.excerpt = make_excerpt(data.content)

    async with storage_errors(db, "update post"):
        await db.commit()
        await db.refresh(post)
    return post


async def delete_post(db: AsyncSession, post_id: uuid.UUID) -> int:
    """Delete a post. Returns the number of rows removed."""
    async with storage_errors(db, "delete post"):
        result = await db.execute(delete(Post).where(Post.id == post_id))
        await db.commit()
    return result.rowcount
