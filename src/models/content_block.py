"""Content block data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class BlockKind(Enum):
    """Block types rendered in previews; everything else is OTHER."""
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    TO_DO = "to_do"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    OTHER = "other"

    @classmethod
    def from_type(cls, block_type: Optional[str]) -> "BlockKind":
        for kind in cls:
            if kind is not cls.OTHER and kind.value == block_type:
                return kind
        return cls.OTHER


def _span_text(span: Dict[str, Any]) -> str:
    text = span.get('plain_text')
    return text if isinstance(text, str) else ''


@dataclass(frozen=True)
class RichText:
    """One rich text span; only the display text is kept."""
    plain_text: str


@dataclass
class ContentBlock:
    """A single block within a page.

    Attributes:
        block_id: Block id (used to list nested children)
        kind: Recognized kind, OTHER for anything unsupported
        block_type: Raw type tag from the API (None if the tag was missing)
        rich_text: Ordered text spans (empty for OTHER)
        checked: Checkbox state, meaningful for TO_DO only
        has_children: Whether the block has nested blocks
    """
    block_id: str
    kind: BlockKind
    block_type: Optional[str] = None
    rich_text: List[RichText] = field(default_factory=list)
    checked: bool = False
    has_children: bool = False

    @property
    def plain_text(self) -> str:
        return "".join(span.plain_text for span in self.rich_text)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContentBlock":
        """Parse a block object from blocks.children.list.

        Never raises on missing nested fields; the result degrades to OTHER or
        to empty text instead.
        """
        if not isinstance(data, dict):
            return cls(block_id='', kind=BlockKind.OTHER)

        block_type = data.get('type')
        kind = BlockKind.from_type(block_type)
        rich_text: List[RichText] = []
        checked = False

        if kind is not BlockKind.OTHER:
            body = data.get(block_type)
            if isinstance(body, dict):
                spans = body.get('rich_text')
                if isinstance(spans, list):
                    rich_text = [
                        RichText(plain_text=_span_text(span))
                        for span in spans
                        if isinstance(span, dict)
                    ]
                checked = bool(body.get('checked', False))

        return cls(
            block_id=data.get('id', ''),
            kind=kind,
            block_type=block_type if isinstance(block_type, str) else None,
            rich_text=rich_text,
            checked=checked,
            has_children=bool(data.get('has_children', False)),
        )
