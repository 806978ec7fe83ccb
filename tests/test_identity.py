"""Tests for the session identity helpers."""

import pytest
from starlette.requests import Request

from minipress.auth import identity
from minipress.constants import IDENTITY_SESSION_KEY, OAUTH_STATE_SESSION_KEY
from minipress.models.schemas import UserIdentity
from minipress.models.user import Role, User


def make_request(session: dict | None = None) -> Request:
    return Request({"type": "http", "session": {} if session is None else session})


class TestIdentity:
    """Tests for remember, current and forget."""

    @pytest.mark.asyncio
    async def test_no_identity(self):
        """Test that an empty session has no user."""
        assert identity.current(make_request()) is None

    @pytest.mark.asyncio
    async def test_remember_then_current(self, test_user: User):
        """Test that the stored snapshot reads back as the same user."""
        request = make_request()

        identity.remember(request, test_user)
        user = identity.current(request)

        assert isinstance(user, UserIdentity)
        assert user.id == test_user.id
        assert user.username == "testuser"
        assert user.role == Role.AUTHOR
        assert user.github_token == "gho_secret_token"

    @pytest.mark.asyncio
    async def test_session_payload_is_json(self, test_user: User):
        """Test that the session holds wire-format values only."""
        request = make_request()

        identity.remember(request, test_user)
        payload = request.session[IDENTITY_SESSION_KEY]

        assert payload["id"] == test_user.id.hex
        assert payload["role"] == "author"
        assert isinstance(payload["created_at"], str)

    @pytest.mark.asyncio
    async def test_malformed_identity_is_dropped(self):
        """Test that an unreadable identity counts as logged out and is removed."""
        request = make_request({IDENTITY_SESSION_KEY: {"id": "nope"}})

        assert identity.current(request) is None
        assert IDENTITY_SESSION_KEY not in request.session

    @pytest.mark.asyncio
    async def test_forget_clears_everything(self, test_user: User):
        """Test that forget also drops a pending OAuth state."""
        request = make_request({OAUTH_STATE_SESSION_KEY: "pending"})
        identity.remember(request, test_user)

        identity.forget(request)

        assert request.session == {}
        assert identity.current(request) is None

    @pytest.mark.asyncio
    async def test_public_view_hides_secrets(self, test_user: User):
        """Test that the public view drops password and token."""
        user = UserIdentity.model_validate(test_user)
        public = user.public().model_dump()

        assert "password" not in public
        assert "github_token" not in public
        assert public["username"] == "testuser"
