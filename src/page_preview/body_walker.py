"""Bounded recursive rendering of a page's block tree.

The body is rendered one block per line. Nested blocks are indented by one
INDENT per level. Two budgets bound the walk: at most block_count blocks are
taken from each children listing (first API page only), and nesting stops
after depth levels.
"""

import logging

from src.models.content_block import ContentBlock
from src.notion_api.api_wrapper import NotionAPIWrapper
from src.notion_api.errors import NotionError
from .block_formatter import format_block

logger = logging.getLogger(__name__)

INDENT = '    '
NEWLINE = '\n'

DEFAULT_BLOCK_COUNT = 20
DEFAULT_BODY_DEPTH = 3


class BodyWalker:
    """Renders page bodies by walking block children.

    Example:
        >>> walker = BodyWalker(api)
        >>> print(walker.get_page_body("571bb99b29e040eb8a46c2f9b7d138af"))
        # Overview
        ・first point
            ・nested point
    """

    def __init__(self, api: NotionAPIWrapper):
        self.api = api

    def get_page_body(
        self,
        block_id: str,
        block_count: int = DEFAULT_BLOCK_COUNT,
        indent: int = 0,
        depth: int = DEFAULT_BODY_DEPTH,
    ) -> str:
        """Render the children of a page or block.

        Args:
            block_id: Page or block whose children are rendered
            block_count: Maximum number of children taken at each level
            indent: Indentation level of this call's lines
            depth: Remaining nesting levels that may still be expanded

        Returns:
            Rendered text; every emitted line ends with a newline. A failed
            children fetch renders as "".
        """
        try:
            response = self.api.list_block_children(block_id)
        except (NotionError, ValueError) as e:
            logger.error(f"Failed to list children of block {block_id}: {e}")
            return ''

        results = response.get('results') if isinstance(response, dict) else None
        if not isinstance(results, list):
            results = []

        text = ''
        for raw_block in results[:block_count]:
            block = ContentBlock.from_api(raw_block)

            block_content = format_block(block)
            if block_content:
                text += INDENT * indent + block_content + NEWLINE

            if block.has_children and depth > 0:
                text += self.get_page_body(
                    block.block_id,
                    block_count=block_count,
                    indent=indent + 1,
                    depth=depth - 1,
                )
        return text
