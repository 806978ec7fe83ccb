"""Authentication module."""

from minipress.auth.dependencies import (
    get_current_user,
    get_oauth,
    get_optional_user,
    require_author,
    require_role,
)
from minipress.auth.oauth import GitHubOAuth

__all__ = [
    "GitHubOAuth",
    "get_current_user",
    "get_oauth",
    "get_optional_user",
    "require_author",
    "require_role",
]
