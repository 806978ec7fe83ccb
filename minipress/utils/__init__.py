"""Utility modules for the MiniPress application."""

from minipress.utils.logging import LogContext, RequestLoggingMiddleware, get_logger, setup_logging
from minipress.utils.security import hash_password
from minipress.utils.text import make_excerpt, slugify

__all__ = [
    # Logging
    "get_logger",
    "LogContext",
    "RequestLoggingMiddleware",
    "setup_logging",
    # Security
    "hash_password",
    # Text
    "make_excerpt",
    "slugify",
]
