"""Identity held in the signed session cookie.

The session cookie is signed by Starlette's ``SessionMiddleware`` with
``APP_SECRET_KEY``; a tampered cookie is dropped before it reaches us. The
identity is a snapshot taken at login and is never re-read from the
database, so role changes take effect on the next login.
"""

import logging

from fastapi import Request
from pydantic import ValidationError

from minipress.constants import IDENTITY_SESSION_KEY
from minipress.models.schemas import UserIdentity
from minipress.models.user import User

logger = logging.getLogger(__name__)


def remember(request: Request, user: User | UserIdentity) -> UserIdentity:
    """Store a snapshot of the user in the session."""
    identity = user if isinstance(user, UserIdentity) else UserIdentity.model_validate(user)
    request.session[IDENTITY_SESSION_KEY] = identity.model_dump(mode="json")
    return identity


def current(request: Request) -> UserIdentity | None:
    """Return the logged-in user, or None if there is no usable identity."""
    payload = request.session.get(IDENTITY_SESSION_KEY)
    if payload is None:
        return None

    try:
        return UserIdentity.model_validate(payload)
    except ValidationError:
        logger.warning("Dropping malformed identity from session")
        request.session.pop(IDENTITY_SESSION_KEY, None)
        return None


def forget(request: Request) -> None:
    """Log out: drop the identity and any pending OAuth state."""
    request.session.clear()
