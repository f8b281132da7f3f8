"""Data models for Slack events and guardian settings."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import EventParseError


@dataclass(frozen=True)
class SharedLink:
    """One link from a link_shared event."""
    url: str
    domain: str


@dataclass
class LinkSharedEvent:
    """A link_shared event.

    Attributes:
        channel: Channel id the message was posted in
        message_ts: Timestamp of the message containing the links
        links: Shared links in message order
    """
    channel: str
    message_ts: str
    links: List[SharedLink] = field(default_factory=list)

    @classmethod
    def from_payload(cls, event: Dict[str, Any]) -> "LinkSharedEvent":
        """Parse the inner 'event' object of an Events API callback.

        Raises:
            EventParseError: If channel, message_ts or links are missing
        """
        if not isinstance(event, dict):
            raise EventParseError("event must be an object")

        missing = [key for key in ('channel', 'message_ts', 'links') if key not in event]
        if missing:
            raise EventParseError(f"missing fields: {', '.join(missing)}")

        raw_links = event['links']
        if not isinstance(raw_links, list):
            raise EventParseError("links must be a list")

        links = []
        for raw_link in raw_links:
            if not isinstance(raw_link, dict) or 'url' not in raw_link:
                raise EventParseError(f"link without url: {raw_link!r}")
            links.append(SharedLink(url=raw_link['url'], domain=raw_link.get('domain', '')))

        return cls(
            channel=event['channel'],
            message_ts=event['message_ts'],
            links=links,
        )


@dataclass
class GuardianConfig:
    """Settings for the ADR guardian.

    Attributes:
        channels: Channel ids watched by the guardian (empty disables it)
        message: Threaded reply posted when a decided ADR is shared
        adr_database_id: Database holding ADR pages; None treats every page
            as an ADR
        decision_property_id: Id of the select property holding the decision
        go_value: Select option name that marks an accepted decision
    """
    channels: List[str] = field(default_factory=list)
    message: str = ''
    adr_database_id: Optional[str] = None
    decision_property_id: str = 'hhz%7C'
    go_value: str = 'Go'

    @property
    def enabled(self) -> bool:
        return bool(self.channels) and bool(self.message)
