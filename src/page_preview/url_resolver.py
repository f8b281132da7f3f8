"""Page id extraction from shared Notion URLs."""

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

logger = logging.getLogger(__name__)

NOTION_DOMAIN_PATTERN = re.compile(r'(www\.)?notion\.so')

# Query parameter carrying the page id when a page is opened as a modal
MODAL_PAGE_QUERY_PARAM = 'p'


def sanitize_link(url: str) -> str:
    """Remove every literal 'amp;' from a shared URL.

    Links sometimes arrive with '&' double-escaped to '&amp;'.
    """
    return url.replace('amp;', '')


def is_notion_domain(domain: str) -> bool:
    """Return True if the shared link's domain belongs to Notion."""
    return NOTION_DOMAIN_PATTERN.search(domain or '') is not None


def get_page_id_from_url(url: str) -> Optional[str]:
    """Extract the page id from a Notion URL.

    Two addressing forms are supported:

    - Modal display, where the id is the 'p' query parameter:
      https://www.notion.so/example/my-title-571bb99b29e040eb8a46c2f9b7d138af?p=5daca1bba9ce4ed0bf7a5d348ac9a81d
    - Page display, where the id is the last '-'-separated part of the
      last path segment:
      https://www.notion.so/example/my-title-571bb99b29e040eb8a46c2f9b7d138af

    Args:
        url: Shared URL (sanitized here before parsing)

    Returns:
        The page id, or None if the URL carries none
    """
    parsed = urlparse(sanitize_link(url))

    query_ids = parse_qs(parsed.query).get(MODAL_PAGE_QUERY_PARAM)
    if query_ids and query_ids[0]:
        return query_ids[0]

    segments = [segment for segment in parsed.path.split('/') if segment]
    if not segments:
        return None

    page_id = segments[-1].split('-')[-1]
    return page_id or None
