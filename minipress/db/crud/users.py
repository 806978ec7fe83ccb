"""CRUD operations for users."""

import uuid
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.db.crud.base import storage_errors
from minipress.exceptions import NotFoundError
from minipress.models.schemas import UserRequest
from minipress.models.user import User
from minipress.utils.security import hash_password

# github_id links the row to a GitHub account and only changes through login
_IMMUTABLE_FIELDS = {"github_id"}


async def get_users(db: AsyncSession) -> Sequence[User]:
    """All users, oldest first."""
    async with storage_errors(db, "read all users"):
        result = await db.execute(select(User).order_by(User.created_at))
        return result.scalars().all()


async def get_user(db: AsyncSession, user_id: uuid.UUID) -> User:
    """Get a user by ID, raising NotFoundError if absent."""
    async with storage_errors(db, "read user"):
        result = await db.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError("User not found")
    return user


async def get_user_by_github_id(db: AsyncSession, github_id: int) -> User:
    """Get the user linked to a GitHub account, raising NotFoundError if absent."""
    async with storage_errors(db, "read user by GitHub ID"):
        result = await db.execute(select(User).where(User.github_id == github_id))
        user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError("User not found")
    return user


async def create_user(db: AsyncSession, data: UserRequest) -> User:
    """Create a user. ID and timestamps are assigned server-side."""
    user = User(
        username=data.username,
        email=data.email,
        password=hash_password(data.password) if data.password else None,
        name=data.name,
        avatar_url=data.avatar_url,
        gravatar_id=data.gravatar_id,
        github_id=data.github_id,
        github_token=data.github_token,
        role=data.role,
    )
    async with storage_errors(db, "create user"):
        db.add(user)
        await db.flush()
        await db.commit()
        await db.refresh(user)
    return user


async def update_user(db: AsyncSession, user_id: uuid.UUID, data: UserRequest) -> User:
    """Replace the fields present in the request; absent fields keep their values."""
    user = await get_user(db, user_id)

    for field in data.model_fields_set - _IMMUTABLE_FIELDS:
        value = getattr(data, field)
        if field == "password" and value:
            value = hash_password(value)
        setattr(user, field, value)

    async with storage_errors(db, "update user"):
        await db.commit()
        await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user_id: uuid.UUID) -> int:
    """Delete a user and their posts. Returns the number of users removed."""
    async with storage_errors(db, "delete user"):
        result = await db.execute(delete(User).where(User.id == user_id))
        await db.commit()
    return result.rowcount
