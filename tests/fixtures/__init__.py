"""Test fixtures for Notion and Slack payloads.

This module provides builders for:
- Notion public API responses (pages, databases, block children)
- Internal loadPageChunk permission responses
- Slack Events API link_shared payloads
"""

from .notion_responses import (
    PAGE_ID,
    PAGE_URL,
    children_response,
    link_shared_payload,
    page_response,
)

__all__ = [
    'PAGE_ID',
    'PAGE_URL',
    'children_response',
    'link_shared_payload',
    'page_response',
]
