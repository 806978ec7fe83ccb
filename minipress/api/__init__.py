"""JSON API routers."""

from minipress.api.router import api_router

__all__ = ["api_router"]
