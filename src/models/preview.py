"""Link preview payload model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

NOTION_FAVICON_URL = 'https://www.notion.so/images/favicon.ico'
BREADCRUMB_SEPARATOR = ' / '


@dataclass
class PreviewPayload:
    """Rendered preview of one shared page.

    Attributes:
        title: Page title
        text: Rendered body (mrkdwn)
        breadcrumbs: Ancestor titles, outermost first, ending with the page
        title_link: The URL exactly as it was shared
        color: Attachment side bar color
        footer_icon: Icon shown next to the breadcrumb footer
        mrkdwn_in: Attachment fields rendered as mrkdwn
    """
    title: str
    text: str
    breadcrumbs: List[str]
    title_link: str
    color: str = '#ffffff'
    footer_icon: str = NOTION_FAVICON_URL
    mrkdwn_in: List[str] = field(default_factory=lambda: ['text'])

    @property
    def footer(self) -> str:
        return BREADCRUMB_SEPARATOR.join(self.breadcrumbs)

    def to_attachment(self) -> Dict[str, Any]:
        """Render the Slack attachment used as an unfurl value."""
        return {
            'title': self.title,
            'mrkdwn_in': list(self.mrkdwn_in),
            'text': self.text,
            'title_link': self.title_link,
            'color': self.color,
            'footer': self.footer,
            'footer_icon': self.footer_icon,
        }
