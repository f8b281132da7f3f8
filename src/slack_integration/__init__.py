"""Slack integration: link_shared handling, unfurl delivery and the ADR guardian."""

from .errors import EventParseError, SlackAPIError, SlackError, SlackUnreachableError
from .event_dispatcher import EventDispatcher
from .guardian import SlackGuardian
from .models import GuardianConfig, LinkSharedEvent, SharedLink
from .slack_client import SlackClient
from .unfurl_handler import LinkSharedHandler

__all__ = [
    'EventParseError',
    'SlackAPIError',
    'SlackError',
    'SlackUnreachableError',
    'EventDispatcher',
    'SlackGuardian',
    'GuardianConfig',
    'LinkSharedEvent',
    'SharedLink',
    'SlackClient',
    'LinkSharedHandler',
]
