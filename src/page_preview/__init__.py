"""Notion page preview rendering.

Resolves shared page URLs into titles, breadcrumb trails and bounded body
renderings suitable for chat link previews.
"""

from .block_formatter import format_block
from .body_walker import BodyWalker
from .breadcrumb_walker import BreadcrumbWalker
from .heading_formatter import format_headings
from .page_resolver import PageResolver, PreviewOptions
from .url_resolver import get_page_id_from_url, is_notion_domain, sanitize_link
from .visibility_checker import VisibilityChecker

__all__ = [
    'format_block',
    'BodyWalker',
    'BreadcrumbWalker',
    'format_headings',
    'PageResolver',
    'PreviewOptions',
    'get_page_id_from_url',
    'is_notion_domain',
    'sanitize_link',
    'VisibilityChecker',
]
