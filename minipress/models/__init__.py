"""SQLAlchemy models."""

from minipress.models.base import Base
from minipress.models.post import Post
from minipress.models.user import POST_AUTHOR_ROLES, POST_EDITOR_ROLES, Role, User

__all__ = [
    "Base",
    "User",
    "Role",
    "POST_AUTHOR_ROLES",
    "POST_EDITOR_ROLES",
    "Post",
]
