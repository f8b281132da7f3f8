"""Notion page and database data models.

Page and database responses are a tagged union: a readable object carries
'parent' (and, for pages, 'properties'); a partial object returned for
inaccessible or deleted content carries only its id. parse_page and
parse_database return UnresolvableObject for the latter so callers branch on
the variant before reading title or parent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ParentKind(Enum):
    """Parent reference kinds that matter for breadcrumbs."""
    NONE = "none"
    PAGE = "page_id"
    DATABASE = "database_id"


@dataclass(frozen=True)
class ParentRef:
    """Reference to a page's or database's parent.

    Attributes:
        kind: NONE, PAGE or DATABASE
        target_id: Parent id (None when kind is NONE)
    """
    kind: ParentKind
    target_id: Optional[str] = None

    @classmethod
    def none(cls) -> "ParentRef":
        return cls(kind=ParentKind.NONE)

    @classmethod
    def from_api(cls, parent: Any) -> "ParentRef":
        """Parse the API 'parent' object.

        Workspace and block parents, unknown types and malformed values all
        map to NONE.
        """
        if not isinstance(parent, dict):
            return cls.none()
        parent_type = parent.get('type')
        for kind in (ParentKind.PAGE, ParentKind.DATABASE):
            if parent_type == kind.value and parent.get(kind.value):
                return cls(kind=kind, target_id=parent[kind.value])
        return cls.none()


@dataclass(frozen=True)
class Page:
    """A readable Notion page.

    Attributes:
        page_id: Page id as returned by the API
        title: Plain text of the title-typed property ("" if absent)
        parent: Parent reference
    """
    page_id: str
    title: str
    parent: ParentRef


@dataclass(frozen=True)
class Database:
    """A readable Notion database.

    The database's own title never appears in breadcrumbs, so it is not kept.
    """
    database_id: str
    parent: ParentRef


@dataclass(frozen=True)
class UnresolvableObject:
    """A page or database that cannot be read as normal data (partial/deleted)."""
    object_id: str
    object_type: str


PageResult = Union[Page, UnresolvableObject]
DatabaseResult = Union[Database, UnresolvableObject]


def join_plain_text(rich_text: Any) -> str:
    """Concatenate the plain_text of a rich text array."""
    if not isinstance(rich_text, list):
        return ""
    return "".join(
        span['plain_text']
        for span in rich_text
        if isinstance(span, dict) and isinstance(span.get('plain_text'), str)
    )


def get_title(properties: Dict[str, Any]) -> str:
    """Return the plain text of the title-typed property.

    When several properties claim type 'title' the last one wins.
    """
    title = ""
    for prop in properties.values():
        if not isinstance(prop, dict) or prop.get('type') != 'title':
            continue
        title = join_plain_text(prop.get('title'))
    return title


def parse_page(data: Dict[str, Any]) -> PageResult:
    """Parse a pages.retrieve response into Page or UnresolvableObject."""
    object_id = data.get('id', '') if isinstance(data, dict) else ''
    if (
        not isinstance(data, dict)
        or not isinstance(data.get('properties'), dict)
        or 'parent' not in data
    ):
        return UnresolvableObject(object_id=object_id, object_type='page')

    return Page(
        page_id=object_id,
        title=get_title(data['properties']),
        parent=ParentRef.from_api(data['parent']),
    )


def parse_database(data: Dict[str, Any]) -> DatabaseResult:
    """Parse a databases.retrieve response into Database or UnresolvableObject."""
    object_id = data.get('id', '') if isinstance(data, dict) else ''
    if not isinstance(data, dict) or 'parent' not in data:
        return UnresolvableObject(object_id=object_id, object_type='database')

    return Database(
        database_id=object_id,
        parent=ParentRef.from_api(data['parent']),
    )


@dataclass
class PageData:
    """Title and breadcrumb trail of one page.

    Attributes:
        title: Page title
        breadcrumbs: Titles ordered from the outermost ancestor to the page
    """
    title: str
    breadcrumbs: List[str]
