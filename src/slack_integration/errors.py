"""Typed exception hierarchy for Slack-related errors."""

from src.notion_api.errors import SyncError


class SlackError(SyncError):
    """Base exception for all Slack-related errors."""
    pass


class SlackAPIError(SlackError):
    """Raised when a Slack Web API method responds with ok=false."""

    def __init__(self, method: str, error: str):
        super().__init__(f"Slack API method {method} failed: {error}")
        self.method = method
        self.error = error


class SlackUnreachableError(SlackError):
    """Raised when the Slack Web API cannot be reached."""

    def __init__(self, method: str, reason: str):
        super().__init__(f"Slack API unreachable calling {method}: {reason}")
        self.method = method
        self.reason = reason


class EventParseError(SlackError):
    """Raised when an Events API payload lacks required fields."""

    def __init__(self, message: str):
        super().__init__(f"Invalid event payload: {message}")
