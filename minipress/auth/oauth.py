"""GitHub OAuth2 authorization-code flow with PKCE.

Flow: ``/login`` stores a CSRF state and a PKCE verifier in the session and
redirects to GitHub. The callback checks the state, exchanges the code for an
access token, reads the GitHub profile and maps it onto a local user.
"""

import logging
import secrets
from typing import Any
from urllib.parse import urlencode

import httpx
from authlib.common.security import generate_token
from authlib.oauth2.rfc7636 import create_s256_code_challenge
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.auth.models import GitHubProfile
from minipress.config import Settings
from minipress.constants import (
    OAUTH_STATE_BYTES,
    OAUTH_STATE_SESSION_KEY,
    OAUTH_VERIFIER_SESSION_KEY,
    PKCE_VERIFIER_LENGTH,
)
from minipress.db.crud import create_user, get_user_by_github_id
from minipress.db.crud.base import storage_errors
from minipress.exceptions import ExchangeError, NotFoundError, OAuthStateError, ProfileFetchError
from minipress.models.schemas import UserRequest
from minipress.models.user import Role, User
from minipress.utils.logging import LogContext

logger = logging.getLogger(__name__)

# Role given to accounts created through GitHub login
DEFAULT_OAUTH_ROLE = Role.SUBSCRIBER


class GitHubOAuth:
    """GitHub OAuth2 client bound to the application settings."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.client = client

    def authorization_url(self, session: dict[str, Any]) -> str:
        """Start a login: remember state and verifier, return the authorize URL."""
        state = secrets.token_urlsafe(OAUTH_STATE_BYTES)
        code_verifier = generate_token(PKCE_VERIFIER_LENGTH)
        session[OAUTH_STATE_SESSION_KEY] = state
        session[OAUTH_VERIFIER_SESSION_KEY] = code_verifier

        params = {
            "client_id": self.settings.github_client_id,
            "redirect_uri": self.settings.github_redirect_uri,
            "scope": self.settings.github_scope,
            "state": state,
            "code_challenge": create_s256_code_challenge(code_verifier),
            "code_challenge_method": "S256",
        }
        return f"{self.settings.github_auth_url}?{urlencode(params)}"

    def pop_code_verifier(self, session: dict[str, Any], state: str) -> str:
        """Consume the pending login's state and return its PKCE verifier.

        Raises OAuthStateError when no login is pending or the state differs.
        """
        stored_state = session.pop(OAUTH_STATE_SESSION_KEY, None)
        code_verifier = session.pop(OAUTH_VERIFIER_SESSION_KEY, None)
        if not stored_state or not code_verifier:
            raise OAuthStateError()
        if not secrets.compare_digest(stored_state, state):
            raise OAuthStateError()
        return code_verifier

    async def exchange_code(self, code: str, code_verifier: str) -> str:
        """Exchange an authorization code for an access token."""
        try:
            response = await self.client.post(
                self.settings.github_token_url,
                data={
                    "client_id": self.settings.github_client_id,
                    "client_secret": self.settings.github_client_secret,
                    "code": code,
                    "redirect_uri": self.settings.github_redirect_uri,
                    "code_verifier": code_verifier,
                    "grant_type": "authorization_code",
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Token exchange request failed: {e}")
            raise ExchangeError() from e

        if response.status_code != 200:
            logger.error(f"Token exchange returned HTTP {response.status_code}")
            raise ExchangeError()

        try:
            token_result = response.json()
        except ValueError as e:
            logger.error("Token exchange returned a non-JSON body")
            raise ExchangeError() from e

        if "error" in token_result:
            logger.error(
                f"Token exchange rejected: {token_result.get('error')} "
                f"({token_result.get('error_description', 'no description')})"
            )
            raise ExchangeError()

        access_token = token_result.get("access_token")
        if not access_token:
            logger.error("Token exchange response has no access_token")
            raise ExchangeError()
        return access_token

    async def fetch_profile(self, access_token: str) -> GitHubProfile:
        """Read the authenticated user's GitHub profile."""
        try:
            response = await self.client.get(
                f"{self.settings.github_api_url}/user",
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"Profile request failed: {e}")
            raise ProfileFetchError() from e

        if response.status_code != 200:
            logger.error(f"Profile request returned HTTP {response.status_code}")
            raise ProfileFetchError()

        try:
            return GitHubProfile.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Profile response could not be parsed: {e}")
            raise ProfileFetchError() from e

    async def complete(
        self,
        db: AsyncSession,
        session: dict[str, Any],
        code: str,
        state: str,
    ) -> User:
        """Finish a login started by ``authorization_url``.

        Steps run in order and the first failure aborts the rest.
        """
        code_verifier = self.pop_code_verifier(session, state)
        access_token = await self.exchange_code(code, code_verifier)
        profile = await self.fetch_profile(access_token)

        log = LogContext(logger, github_id=profile.id, login=profile.login)
        user = await find_or_create_user(db, profile, access_token)
        log.info(f"Logged in as local user {user.id}")
        return user


async def find_or_create_user(
    db: AsyncSession,
    profile: GitHubProfile,
    access_token: str,
) -> User:
    """Map a GitHub profile onto a local user.

    An existing user keeps its local fields (role, username, ...); only the
    access token and avatar are refreshed. A concurrent first login for the
    same account fails on the unique github_id instead of duplicating it.
    """
    try:
        user = await get_user_by_github_id(db, profile.id)
    except NotFoundError:
        logger.info(f"Creating local user for GitHub account {profile.login}")
        return await create_user(
            db,
            UserRequest(
                username=profile.login,
                email=profile.email,
                name=profile.name,
                avatar_url=profile.avatar_url,
                gravatar_id=profile.gravatar_id or None,
                github_id=profile.id,
                github_token=access_token,
                role=DEFAULT_OAUTH_ROLE,
            ),
        )

    user.github_token = access_token
    if profile.avatar_url:
        user.avatar_url = profile.avatar_url
    async with storage_errors(db, "refresh GitHub token"):
        await db.commit()
        await db.refresh(user)
    return user
