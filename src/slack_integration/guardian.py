"""ADR guardian: thread replies when a decided ADR is shared.

In watched channels, a message linking to an ADR page whose decision
property is set to the configured "go" option gets a fixed threaded reply.
"""

import logging
from typing import Any, Dict

from src.models.notion_page import Page, ParentKind, parse_page
from src.notion_api.api_wrapper import NotionAPIWrapper
from src.notion_api.errors import SyncError
from src.page_preview.url_resolver import get_page_id_from_url, is_notion_domain
from .models import GuardianConfig, LinkSharedEvent, SharedLink
from .slack_client import SlackClient

logger = logging.getLogger(__name__)


def _normalize_id(object_id: str) -> str:
    return object_id.replace('-', '').lower()


def is_go_decision(property_value: Dict[str, Any], go_value: str) -> bool:
    """True if a select property value is set to go_value."""
    if not isinstance(property_value, dict) or property_value.get('type') != 'select':
        return False
    selected = property_value.get('select')
    return isinstance(selected, dict) and selected.get('name') == go_value


class SlackGuardian:
    """Posts a reminder in the thread of messages sharing accepted ADRs.

    Example:
        >>> guardian = SlackGuardian(api, slack, GuardianConfig(
        ...     channels=["C123"], message="Remember to update the runbook"))
        >>> guardian.handle(event)
        True
    """

    def __init__(self, api: NotionAPIWrapper, slack: SlackClient, config: GuardianConfig):
        self.api = api
        self.slack = slack
        self.config = config

    def is_page_adr(self, page_id: str) -> bool:
        """True if the page lives in the configured ADR database.

        Without a configured database every page counts as an ADR.
        """
        if not self.config.adr_database_id:
            return True

        page = parse_page(self.api.retrieve_page(page_id))
        if not isinstance(page, Page):
            logger.error(f"parent not found in page {page_id}")
            return False

        return (
            page.parent.kind is ParentKind.DATABASE
            and _normalize_id(page.parent.target_id) == _normalize_id(self.config.adr_database_id)
        )

    def link_has_go_adr(self, link: SharedLink) -> bool:
        """Evaluate one link; errors count as "no"."""
        if not is_notion_domain(link.domain):
            return False

        page_id = get_page_id_from_url(link.url)
        if page_id is None:
            logger.error(f"PageId not found in {link.url}")
            return False

        try:
            if not self.is_page_adr(page_id):
                return False
            decision = self.api.retrieve_page_property(
                page_id,
                self.config.decision_property_id
            )
        except (SyncError, ValueError) as e:
            logger.error(f"Failed to check ADR decision for {link.url}: {e}")
            return False

        return is_go_decision(decision, self.config.go_value)

    def handle(self, event: LinkSharedEvent) -> bool:
        """Reply in thread if the event shares an accepted ADR.

        Returns:
            True if a reply was posted
        """
        if not self.config.enabled or event.channel not in self.config.channels:
            return False

        if not any(self.link_has_go_adr(link) for link in event.links):
            return False

        try:
            self.slack.post_message(
                channel=event.channel,
                text=self.config.message,
                thread_ts=event.message_ts,
            )
        except SyncError as e:
            logger.error(f"Failed to post guardian reply for message {event.message_ts}: {e}")
            return False

        logger.info(f"Posted guardian reply in {event.channel} for message {event.message_ts}")
        return True
