"""Template context helpers."""

from typing import Any

from fastapi import Request

from minipress.config import get_settings
from minipress.models.schemas import UserIdentity


def get_base_context(request: Request, user: UserIdentity | None = None) -> dict[str, Any]:
    """Get base context for all templates."""
    settings = get_settings()
    return {
        "request": request,
        "user": user.public() if user else None,
        "app_name": settings.app_name,
        "login_url": "/login",
        "logout_url": "/logout",
    }
