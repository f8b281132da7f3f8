"""Notion client library for link previews.

This package provides Python abstractions over the Notion public API
(via notion-client) with a typed error hierarchy.
"""

from .errors import (
    SyncError,
    NotionError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "NotionError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
