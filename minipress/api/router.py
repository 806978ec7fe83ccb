"""Main API router."""

from fastapi import APIRouter

from minipress.api.auth import github_callback
from minipress.api.auth import router as auth_router
from minipress.api.posts import router as posts_router
from minipress.api.users import router as users_router
from minipress.config import get_settings

settings = get_settings()

api_router = APIRouter()

# The callback path is deployment configuration, so it is mounted here
auth_router.add_api_route(
    settings.github_callback_path,
    github_callback,
    methods=["GET"],
    name="github_callback",
)

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(users_router, tags=["users"])
api_router.include_router(posts_router, tags=["posts"])
