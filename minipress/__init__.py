"""MiniPress: a small blog backend with GitHub login."""

__version__ = "0.1.0"
