"""Authentication dependencies for FastAPI."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request

from minipress.auth import identity
from minipress.auth.oauth import GitHubOAuth
from minipress.config import Settings, get_settings
from minipress.exceptions import UnauthorizedError
from minipress.models.schemas import UserIdentity
from minipress.models.user import POST_AUTHOR_ROLES, Role
from minipress.utils.http_client import get_provider_client


def get_oauth(settings: Annotated[Settings, Depends(get_settings)]) -> GitHubOAuth:
    """OAuth flow controller bound to the settings and the shared HTTP client."""
    return GitHubOAuth(settings, get_provider_client())


async def get_optional_user(request: Request) -> UserIdentity | None:
    """Get current user from the session cookie if logged in."""
    return identity.current(request)


async def get_current_user(
    user: Annotated[UserIdentity | None, Depends(get_optional_user)],
) -> UserIdentity:
    """Get current user, raising 401 if not authenticated."""
    if not user:
        raise UnauthorizedError()
    return user


def require_role(allowed: frozenset[Role]) -> Callable[..., Awaitable[UserIdentity]]:
    """Dependency factory: current user, if their role is in ``allowed``."""

    async def dependency(
        user: Annotated[UserIdentity, Depends(get_current_user)],
    ) -> UserIdentity:
        if user.role not in allowed:
            raise UnauthorizedError()
        return user

    return dependency


require_author = require_role(POST_AUTHOR_ROLES)
