"""link_shared handling: build previews and attach them to the message."""

import logging
from typing import Any, Dict

from src.notion_api.errors import SyncError
from src.page_preview.page_resolver import PageResolver
from src.page_preview.url_resolver import is_notion_domain
from .models import LinkSharedEvent
from .slack_client import SlackClient

logger = logging.getLogger(__name__)


class LinkSharedHandler:
    """Unfurls every public Notion page linked in a message.

    Links are handled one at a time and independently: a link that fails to
    resolve is logged and left without a preview.
    """

    def __init__(self, resolver: PageResolver, slack: SlackClient):
        self.resolver = resolver
        self.slack = slack

    def build_unfurls(self, event: LinkSharedEvent) -> Dict[str, Dict[str, Any]]:
        """Resolve the event's links into an unfurl mapping.

        Returns:
            Mapping from each link's original URL to its attachment. The key
            must be the URL exactly as shared or Slack will not match it.
        """
        unfurls: Dict[str, Dict[str, Any]] = {}

        for link in event.links:
            logger.debug(f"handling {link.url}")
            if not is_notion_domain(link.domain):
                continue

            try:
                payload = self.resolver.resolve(link.url)
            except (SyncError, ValueError) as e:
                logger.error(f"Failed to build preview for {link.url}: {e}")
                continue
            except Exception as e:
                logger.exception(f"Unexpected error building preview for {link.url}: {e}")
                continue

            if payload is not None:
                unfurls[link.url] = payload.to_attachment()

        return unfurls

    def handle(self, event: LinkSharedEvent) -> Dict[str, Dict[str, Any]]:
        """Build previews and deliver them with chat.unfurl.

        Delivery failures are logged, not raised.

        Returns:
            The unfurl mapping (delivered or not)
        """
        unfurls = self.build_unfurls(event)
        if not unfurls:
            logger.info(f"No previews to attach for message {event.message_ts}")
            return unfurls

        try:
            self.slack.unfurl(channel=event.channel, ts=event.message_ts, unfurls=unfurls)
            logger.info(f"Attached {len(unfurls)} preview(s) to message {event.message_ts}")
        except SyncError as e:
            logger.error(f"Failed to deliver unfurls for message {event.message_ts}: {e}")

        return unfurls
