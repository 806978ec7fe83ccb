"""Pydantic schemas for API validation and serialization."""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from minipress.models.user import Role


class RoleField(BaseModel):
    """Mixin giving a ``role`` field its slug wire format."""

    role: Role = Role.SUBSCRIBER

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.isdigit():
            return Role.from_slug(v)
        return v

    @field_serializer("role")
    def serialize_role(self, role: Role) -> str:
        return role.slug


# User schemas
class UserRequest(RoleField):
    """User create/update payload."""

    username: str = Field(min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=1)
    name: str | None = None
    avatar_url: str | None = Field(default=None, max_length=2000)
    gravatar_id: str | None = None
    github_id: int | None = None
    github_token: str | None = None

    @field_validator("role")
    @classmethod
    def reject_guest(cls, role: Role) -> Role:
        if role is Role.GUEST:
            raise ValueError("guest is not an assignable role")
        return role


class UserRead(RoleField):
    """Public user shape: never carries the password hash or the GitHub token."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    github_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("id")
    def serialize_id(self, value: uuid.UUID) -> str:
        return value.hex


class UserIdentity(UserRead):
    """Full internal snapshot of a user, as kept in the signed session cookie."""

    password: str | None = None
    github_token: str | None = None

    def public(self) -> UserRead:
        """Drop the secret fields."""
        return UserRead.model_validate(self.model_dump(exclude={"password", "github_token"}))


# Post schemas
class PostRequest(BaseModel):
    """Post create/update payload."""

    title: str = Field(min_length=1, max_length=500)
    content: str


class PostRead(BaseModel):
    """Post read schema."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    slug: str
    excerpt: str
    content: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("id", "user_id")
    def serialize_ids(self, value: uuid.UUID) -> str:
        return value.hex


class DeleteResult(BaseModel):
    """Delete response."""

    deleted: int
    message: str
