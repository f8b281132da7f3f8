"""API wrapper for the Notion public API.

This module wraps the notion-client SDK and provides error translation from
SDK and transport exceptions to our typed exception hierarchy. Every call is
attempted exactly once; link previews are latency bound by the chat
platform's own event timeout, so failures are surfaced instead of retried.
"""

import logging
import re
from typing import Any, Dict, Optional

import httpx
from notion_client import APIErrorCode, APIResponseError, Client
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from .auth import Authenticator
from .errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    PageNotFoundError,
)

logger = logging.getLogger(__name__)

NOTION_API_URL = "https://api.notion.com"

# Notion ids are UUIDs, with or without dashes
_OBJECT_ID_PATTERN = re.compile(r'^[0-9a-fA-F]{32}$')


class NotionAPIWrapper:
    """Wrapper around the notion-client Client with error translation.

    This class provides a thin wrapper over the Notion SDK that:
    1. Handles authentication using the Authenticator
    2. Validates object ids before they are interpolated into API paths
    3. Translates SDK and HTTP errors to typed exceptions
    4. Returns raw response dicts; parsing lives in src.models

    Example:
        >>> api = NotionAPIWrapper(Authenticator())
        >>> page = api.retrieve_page("571bb99b29e040eb8a46c2f9b7d138af")
    """

    def __init__(self, authenticator: Authenticator, client: Optional[Client] = None):
        """Initialize the API wrapper.

        Args:
            authenticator: Authenticator instance for loading the Notion token
            client: Optional pre-built notion-client Client (used by tests)
        """
        self._authenticator = authenticator
        self._client: Optional[Client] = client

    def _get_client(self) -> Client:
        """Get or lazily create the Notion SDK client.

        Raises:
            InvalidCredentialsError: If NOTION_TOKEN is missing
        """
        if self._client is None:
            self._client = Client(
                auth=self._authenticator.get_notion_token(),
                timeout_ms=30_000,
            )
        return self._client

    def _validate_object_id(self, object_id: str) -> None:
        """Validate that an id looks like a Notion UUID.

        Raises:
            ValueError: If object_id is empty or not a 32-digit hex UUID
        """
        if not object_id or not str(object_id).strip():
            raise ValueError("object id cannot be empty")

        compact = str(object_id).strip().replace('-', '')
        if not _OBJECT_ID_PATTERN.match(compact):
            raise ValueError(
                f"Invalid object id format: '{object_id}'. "
                f"Notion ids must be 32 hexadecimal characters."
            )

    def _sanitize_credentials(self, text: str) -> str:
        """Mask tokens that may appear in SDK error messages."""
        if not text:
            return text

        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        # Notion integration tokens: secret_xxx (legacy) and ntn_xxx
        sanitized = re.sub(
            r'\b(secret|ntn)_[a-zA-Z0-9]{8,}\b',
            '***REDACTED***',
            sanitized
        )
        return sanitized

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate SDK/transport exceptions to typed Notion exceptions.

        Args:
            exception: The original exception from the SDK
            operation: Description of the failed operation, e.g.
                "retrieve_page(<id>)"

        Returns:
            Exception: One of our typed exceptions
        """
        if isinstance(exception, (RequestTimeoutError, httpx.TransportError)):
            return APIUnreachableError(endpoint=NOTION_API_URL)

        if isinstance(exception, APIResponseError):
            if exception.code == APIErrorCode.ObjectNotFound:
                object_id = "unknown"
                match = re.search(r'\(([^)]+)\)', operation)
                if match:
                    object_id = match.group(1)
                return PageNotFoundError(object_id=object_id)
            if exception.code == APIErrorCode.Unauthorized:
                return InvalidCredentialsError(
                    credential='NOTION_TOKEN',
                    endpoint=NOTION_API_URL
                )

        if isinstance(exception, HTTPResponseError) and exception.status == 404:
            return PageNotFoundError(object_id="unknown")

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"Notion API failure during {operation}")

    def retrieve_page(self, page_id: str) -> Dict[str, Any]:
        """Fetch a page object.

        The response may be a partial object (only "object" and "id") when the
        integration cannot read the page; see src.models.notion_page.parse_page.

        Raises:
            ValueError: If page_id is malformed
            InvalidCredentialsError: If the token is missing or rejected
            PageNotFoundError: If the page doesn't exist
            APIUnreachableError: If the API is unreachable
            APIAccessError: For any other API failure
        """
        self._validate_object_id(page_id)
        try:
            return self._get_client().pages.retrieve(page_id=page_id)
        except InvalidCredentialsError:
            raise
        except Exception as e:
            raise self._translate_error(e, f"retrieve_page({page_id})") from e

    def retrieve_database(self, database_id: str) -> Dict[str, Any]:
        """Fetch a database object.

        Raises:
            Same as retrieve_page.
        """
        self._validate_object_id(database_id)
        try:
            return self._get_client().databases.retrieve(database_id=database_id)
        except InvalidCredentialsError:
            raise
        except Exception as e:
            raise self._translate_error(e, f"retrieve_database({database_id})") from e

    def list_block_children(self, block_id: str) -> Dict[str, Any]:
        """Fetch the first page of a block's (or page's) children.

        Pagination cursors in the response are deliberately not followed.

        Returns:
            Dict with a 'results' list of block objects

        Raises:
            Same as retrieve_page.
        """
        self._validate_object_id(block_id)
        try:
            return self._get_client().blocks.children.list(block_id=block_id)
        except InvalidCredentialsError:
            raise
        except Exception as e:
            raise self._translate_error(e, f"list_block_children({block_id})") from e

    def retrieve_page_property(self, page_id: str, property_id: str) -> Dict[str, Any]:
        """Fetch a single property value of a page.

        Args:
            page_id: The page id
            property_id: The property id as shown by the API (URL-encoded,
                e.g. "hhz%7C")

        Returns:
            Dict with 'type' and a value keyed by that type

        Raises:
            Same as retrieve_page.
        """
        self._validate_object_id(page_id)
        try:
            return self._get_client().pages.properties.retrieve(
                page_id=page_id,
                property_id=property_id
            )
        except InvalidCredentialsError:
            raise
        except Exception as e:
            raise self._translate_error(
                e, f"retrieve_page_property({page_id})"
            ) from e
