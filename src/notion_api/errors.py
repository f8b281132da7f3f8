"""Typed exception hierarchy for Notion-related errors.

This module defines all custom exceptions used by the Notion client library.
All exceptions inherit from NotionError base class for easy catching and
include descriptive messages with context to help with debugging.
"""


class SyncError(Exception):
    """Base exception for all notion-unfurl errors.

    Use this to catch any application-level error from the service.
    """
    pass


class NotionError(SyncError):
    """Base exception for all Notion-related errors."""
    pass


class InvalidCredentialsError(NotionError):
    """Raised when a required credential is missing or rejected by the API."""

    def __init__(self, credential: str, endpoint: str):
        super().__init__(
            f"Credential {credential} is missing or invalid (endpoint: {endpoint})"
        )
        self.credential = credential
        self.endpoint = endpoint


class PageNotFoundError(NotionError):
    """Raised when a requested page, database or block does not exist."""

    def __init__(self, object_id: str):
        super().__init__(f"Object {object_id} not found")
        self.object_id = object_id


class APIUnreachableError(NotionError):
    """Raised when the Notion API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(NotionError):
    """Raised when an API call fails for any other reason."""

    def __init__(self, message: str = "Notion API failure"):
        super().__init__(message)
