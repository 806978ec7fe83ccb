"""Authentication endpoints: GitHub login, callback, logout."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.auth import get_current_user, get_oauth, identity
from minipress.auth.oauth import GitHubOAuth
from minipress.db import get_db
from minipress.exceptions import (
    InvalidInputError,
    OAuthError,
    OAuthStateError,
    ServiceUnavailableError,
    StorageError,
)
from minipress.models.schemas import UserIdentity, UserRead

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/login")
async def github_login(
    request: Request,
    oauth: Annotated[GitHubOAuth, Depends(get_oauth)],
) -> RedirectResponse:
    """Initiate GitHub OAuth login."""
    url = oauth.authorization_url(request.session)
    return RedirectResponse(url=url, status_code=302)


async def github_callback(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    oauth: Annotated[GitHubOAuth, Depends(get_oauth)],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Handle GitHub OAuth callback.

    Mounted at the configured callback path by ``minipress.api.router``.
    """
    if error or not code or not state:
        logger.warning(f"GitHub callback without a code (error={error})")
        identity.forget(request)
        raise OAuthError()

    try:
        user = await oauth.complete(db, request.session, code, state)
    except OAuthStateError:
        # Stale or forged callback: clear the session and restart the flow
        identity.forget(request)
        return RedirectResponse(url="/login", status_code=302)
    except ServiceUnavailableError:
        raise
    except StorageError as e:
        raise InvalidInputError("Failed to find or create user") from e

    identity.remember(request, user)
    return RedirectResponse(url="/", status_code=302)


@router.get("/logout")
async def logout(request: Request) -> RedirectResponse:
    """Log out the current user."""
    identity.forget(request)
    return RedirectResponse(url="/", status_code=302)


@router.get("/me", response_model=UserRead)
async def get_me(user: Annotated[UserIdentity, Depends(get_current_user)]) -> UserRead:
    """Get current authenticated user."""
    return user.public()
