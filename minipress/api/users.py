"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.api.params import parse_id
from minipress.db import get_db
from minipress.db.crud import create_user, delete_user, get_user, get_users, update_user
from minipress.exceptions import NotFoundError
from minipress.models.schemas import DeleteResult, UserRead, UserRequest

router = APIRouter()


@router.get("/users", response_model=list[UserRead])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[UserRead]:
    """List all users, oldest first."""
    users = await get_users(db)
    return [UserRead.model_validate(user) for user in users]


@router.get("/user/{user_id}", response_model=UserRead)
async def get_user_endpoint(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRead:
    """Get a single user."""
    user = await get_user(db, parse_id(user_id, "User"))
    return UserRead.model_validate(user)


@router.post("/user", response_model=UserRead)
async def create_user_endpoint(
    data: UserRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRead:
    """Register a user."""
    user = await create_user(db, data)
    return UserRead.model_validate(user)


@router.put("/user/{user_id}", response_model=UserRead)
async def update_user_endpoint(
    user_id: str,
    data: UserRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRead:
    """Update a user."""
    user = await update_user(db, parse_id(user_id, "User"), data)
    return UserRead.model_validate(user)


@router.delete("/user/{user_id}", response_model=DeleteResult)
async def delete_user_endpoint(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DeleteResult:
    """Delete a user and their posts."""
    deleted = await delete_user(db, parse_id(user_id, "User"))
    if not deleted:
        raise NotFoundError("User not found")
    return DeleteResult(deleted=deleted, message=f"Successfully deleted {deleted} record(s)")
