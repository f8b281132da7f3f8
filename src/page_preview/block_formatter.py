"""Single-block rendering into Slack mrkdwn lines."""

import logging
from typing import Callable, Dict

from src.models.content_block import BlockKind, ContentBlock

logger = logging.getLogger(__name__)

LIST_ITEM_MARK = '・'


def _format_to_do(block: ContentBlock) -> str:
    check_mark = 'x' if block.checked else ' '
    return f"- [{check_mark}] {block.plain_text}"


_FORMATTERS: Dict[BlockKind, Callable[[ContentBlock], str]] = {
    BlockKind.PARAGRAPH: lambda block: block.plain_text,
    BlockKind.HEADING_1: lambda block: '# ' + block.plain_text,
    BlockKind.HEADING_2: lambda block: '## ' + block.plain_text,
    BlockKind.HEADING_3: lambda block: '### ' + block.plain_text,
    BlockKind.TO_DO: _format_to_do,
    BlockKind.BULLETED_LIST_ITEM: lambda block: LIST_ITEM_MARK + block.plain_text,
    # Numbered items share the bullet mark; sequential numbers are not tracked.
    BlockKind.NUMBERED_LIST_ITEM: lambda block: LIST_ITEM_MARK + block.plain_text,
}


def format_block(block: ContentBlock) -> str:
    """Render one block as a single line of text.

    Args:
        block: Parsed content block

    Returns:
        The rendered line, or "" for unsupported block types
    """
    formatter = _FORMATTERS.get(block.kind)
    if formatter is None:
        logger.debug(f"Unsupported type: {block.block_type}")
        return ''
    return formatter(block)
