"""Server-rendered pages."""

from minipress.web.router import STATIC_DIR, favicon_router, web_router

__all__ = ["STATIC_DIR", "favicon_router", "web_router"]
