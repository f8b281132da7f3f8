"""Authentication module for loading service credentials.

This module loads the Notion and Slack credentials from environment variables
using python-dotenv. Each credential is validated on access so that commands
needing only one of them (e.g. a local preview) do not require the others.
"""

import os

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Authenticator:
    """Loads and validates credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Environment variables:
        NOTION_TOKEN: Notion integration token (public API)
        NOTION_COOKIE_TOKEN: Cookie header value for the internal
            loadPageChunk endpoint used by the visibility check
        SLACK_BOT_TOKEN: Slack bot token for chat.unfurl / chat.postMessage

    Example:
        >>> auth = Authenticator()
        >>> token = auth.get_notion_token()
    """

    NOTION_ENDPOINT = "https://api.notion.com"
    NOTION_INTERNAL_ENDPOINT = "https://www.notion.so/api/v3"
    SLACK_ENDPOINT = "https://slack.com/api"

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_notion_token(self) -> str:
        """Return NOTION_TOKEN.

        Raises:
            InvalidCredentialsError: If the variable is unset or empty
        """
        return self._require('NOTION_TOKEN', self.NOTION_ENDPOINT)

    def get_notion_cookie_token(self) -> str:
        """Return NOTION_COOKIE_TOKEN.

        Raises:
            InvalidCredentialsError: If the variable is unset or empty
        """
        return self._require('NOTION_COOKIE_TOKEN', self.NOTION_INTERNAL_ENDPOINT)

    def get_slack_bot_token(self) -> str:
        """Return SLACK_BOT_TOKEN.

        Raises:
            InvalidCredentialsError: If the variable is unset or empty
        """
        return self._require('SLACK_BOT_TOKEN', self.SLACK_ENDPOINT)

    @staticmethod
    def _require(name: str, endpoint: str) -> str:
        value = os.getenv(name)
        if not value:
            raise InvalidCredentialsError(credential=name, endpoint=endpoint)
        return value
