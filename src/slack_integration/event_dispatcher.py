"""Routing of Slack Events API payloads to handlers.

The HTTP endpoint itself (request signing, acknowledgement within Slack's
three-second window) is provided by the hosting platform; this module only
interprets an already-received JSON body.
"""

import logging
from typing import Any, Dict, Optional

from .errors import EventParseError
from .guardian import SlackGuardian
from .models import LinkSharedEvent
from .unfurl_handler import LinkSharedHandler

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Dispatches url_verification and link_shared callbacks."""

    def __init__(self, unfurl_handler: LinkSharedHandler, guardian: Optional[SlackGuardian] = None):
        self.unfurl_handler = unfurl_handler
        self.guardian = guardian

    def dispatch(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Handle one Events API body.

        Returns:
            {"challenge": ...} for url_verification; for link_shared a summary
            with the unfurled URLs and whether the guardian replied; {} for
            ignored payloads

        Raises:
            EventParseError: If the payload is not an object or a link_shared
                event lacks required fields
        """
        if not isinstance(payload, dict):
            raise EventParseError("payload must be an object")

        payload_type = payload.get('type')
        if payload_type == 'url_verification':
            return {'challenge': payload.get('challenge', '')}

        if payload_type != 'event_callback':
            logger.debug(f"Ignoring payload of type {payload_type}")
            return {}

        event = payload.get('event')
        event_type = event.get('type') if isinstance(event, dict) else None
        if event_type != 'link_shared':
            logger.debug(f"Ignoring event of type {event_type}")
            return {}

        link_event = LinkSharedEvent.from_payload(event)

        guardian_replied = False
        if self.guardian is not None:
            guardian_replied = self.guardian.handle(link_event)

        unfurls = self.unfurl_handler.handle(link_event)

        return {
            'unfurled': list(unfurls.keys()),
            'guardian_replied': guardian_replied,
        }
