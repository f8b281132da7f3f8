"""Data models for Notion pages, content blocks and link previews."""

from src.models.content_block import BlockKind, ContentBlock, RichText
from src.models.notion_page import (
    Database,
    Page,
    PageData,
    ParentKind,
    ParentRef,
    UnresolvableObject,
    parse_database,
    parse_page,
)
from src.models.preview import PreviewPayload

__all__ = [
    'BlockKind',
    'ContentBlock',
    'RichText',
    'Database',
    'Page',
    'PageData',
    'ParentKind',
    'ParentRef',
    'UnresolvableObject',
    'parse_database',
    'parse_page',
    'PreviewPayload',
]
