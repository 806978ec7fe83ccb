"""User model and role enumeration."""

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, SmallInteger, String, Text, TypeDecorator, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from minipress.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from minipress.models.post import Post


class Role(enum.IntEnum):
    """User role. Lower ordinal means more privilege."""

    SUPER_ADMIN = 1  # Access to everything
    ADMIN = 2
    EDITOR = 3  # Publishes and edits posts, including other users' posts
    AUTHOR = 4  # Publishes and edits own posts
    CONTRIBUTOR = 5  # Writes own posts but cannot publish them
    SUBSCRIBER = 6  # Manages own profile only
    GUEST = 7  # No account; never persisted

    @property
    def slug(self) -> str:
        """Wire name, e.g. ``super-admin``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_slug(cls, slug: str) -> "Role":
        """Decode a wire name. Unknown names fall back to GUEST."""
        for role in cls:
            if role.slug == slug:
                return role
        return cls.GUEST


# Roles allowed to publish new posts
POST_AUTHOR_ROLES = frozenset({Role.SUPER_ADMIN, Role.ADMIN, Role.EDITOR, Role.AUTHOR})

# Roles allowed to edit or delete posts they do not own
POST_EDITOR_ROLES = frozenset({Role.SUPER_ADMIN, Role.ADMIN, Role.EDITOR})


class RoleType(TypeDecorator):
    """Stores a Role as its ordinal in a SMALLINT column."""

    impl = SmallInteger
    cache_ok = True

    def process_bind_param(self, value: Role | int | None, dialect) -> int | None:
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value: int | None, dialect) -> Role | None:
        if value is None:
            return None
        return Role(value)


class User(Base, TimestampMixin):
    """Local account, created on first GitHub login or explicit registration."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)  # Hash, never plain text
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    gravatar_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[Role] = mapped_column(RoleType, default=Role.SUBSCRIBER, nullable=False)

    # GitHub account link
    github_id: Mapped[int | None] = mapped_column(BigInteger, unique=True, index=True, nullable=True)
    github_token: Mapped[str | None] = mapped_column(Text, nullable=True)

    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="select",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
