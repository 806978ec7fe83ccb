"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.api.params import parse_id
from minipress.auth import get_current_user, require_author
from minipress.db import get_db
from minipress.db.crud import create_post, delete_post, get_post, get_posts, update_post
from minipress.exceptions import ForbiddenError, NotFoundError
from minipress.models.post import Post
from minipress.models.schemas import DeleteResult, PostRead, PostRequest, UserIdentity
from minipress.models.user import POST_EDITOR_ROLES

router = APIRouter()


def ensure_can_modify(user: UserIdentity, post: Post) -> None:
    """Owners may change their own posts; editors and above may change any."""
    if post.user_id != user.id and user.role not in POST_EDITOR_ROLES:
        raise ForbiddenError("You can only modify your own posts")


@router.get("/posts", response_model=list[PostRead])
async def list_posts(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PostRead]:
    """List all posts, oldest first."""
    posts = await get_posts(db)
    return [PostRead.model_validate(post) for post in posts]


@router.get("/post/{post_id}", response_model=PostRead)
async def get_post_endpoint(
    post_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostRead:
    """Get a single post."""
    post = await get_post(db, parse_id(post_id, "Post"))
    return PostRead.model_validate(post)


@router.post("/post", response_model=PostRead)
async def create_post_endpoint(
    data: PostRequest,
    user: Annotated[UserIdentity, Depends(require_author)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostRead:
    """Publish a post as the current user."""
    post = await create_post(db, user.id, data)
    return PostRead.model_validate(post)


@router.put("/post/{post_id}", response_model=PostRead)
async def update_post_endpoint(
    post_id: str,
    data: PostRequest,
    user: Annotated[UserIdentity, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostRead:
    """Update a post's title and content."""
    post_uuid = parse_id(post_id, "Post")
    ensure_can_modify(user, await get_post(db, post_uuid))
    post = await update_post(db, post_uuid, data)
    return PostRead.model_validate(post)


@router.delete("/post/{post_id}", response_model=DeleteResult)
async def delete_post_endpoint(
    post_id: str,
    user: Annotated[UserIdentity, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DeleteResult:
    """Delete a post."""
    post_uuid = parse_id(post_id, "Post")
    ensure_can_modify(user, await get_post(db, post_uuid))
    deleted = await delete_post(db, post_uuid)
    if not deleted:
        raise NotFoundError("Post not found")
    return DeleteResult(deleted=deleted, message=f"Successfully deleted {deleted} record(s)")
