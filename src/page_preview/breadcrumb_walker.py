"""Bounded recursive resolution of a page's ancestor trail.

A page's trail is its ancestors' titles followed by its own title. Page
parents cost one level of the depth budget. A database parent also costs one
level, but the database's own title is never shown; only the page that
contains the database (and that page's ancestors) contributes further titles,
at the same depth the database was reached with.
"""

import logging
from typing import List

from src.models.notion_page import (
    PageData,
    PageResult,
    ParentKind,
    UnresolvableObject,
    parse_database,
    parse_page,
)
from src.notion_api.api_wrapper import NotionAPIWrapper
from src.notion_api.errors import NotionError

logger = logging.getLogger(__name__)

DEFAULT_BREADCRUMBS_DEPTH = 2


class BreadcrumbWalker:
    """Builds breadcrumb trails by following parent references.

    Example:
        >>> walker = BreadcrumbWalker(api)
        >>> data = walker.get_page_data("571bb99b29e040eb8a46c2f9b7d138af")
        >>> " / ".join(data.breadcrumbs)
        'Engineering / Decision log'
    """

    def __init__(self, api: NotionAPIWrapper):
        self.api = api

    def get_page_data(
        self,
        page_id: str,
        depth: int = DEFAULT_BREADCRUMBS_DEPTH,
    ) -> PageData:
        """Retrieve a page and resolve its title and breadcrumb trail.

        Raises:
            NotionError: If the page itself cannot be retrieved
            ValueError: If page_id is malformed
        """
        page = parse_page(self.api.retrieve_page(page_id))
        title = page.title if not isinstance(page, UnresolvableObject) else ''
        return PageData(
            title=title,
            breadcrumbs=self.get_page_breadcrumbs(page, depth=depth),
        )

    def get_page_breadcrumbs(self, page: PageResult, depth: int = DEFAULT_BREADCRUMBS_DEPTH) -> List[str]:
        """Return the trail ending with this page's title.

        Args:
            page: Parsed page (either variant)
            depth: Remaining levels; nothing is returned at 0 or below
        """
        if depth <= 0:
            return []
        if isinstance(page, UnresolvableObject):
            logger.error(f"parent not found in page {page.object_id}")
            return []

        breadcrumbs = [page.title]

        if page.parent.kind is ParentKind.DATABASE:
            breadcrumbs = self._database_breadcrumbs(page.parent.target_id, depth - 1) + breadcrumbs
        elif page.parent.kind is ParentKind.PAGE:
            breadcrumbs = self._page_breadcrumbs(page.parent.target_id, depth - 1) + breadcrumbs

        return breadcrumbs

    def _page_breadcrumbs(self, page_id: str, depth: int) -> List[str]:
        if depth <= 0:
            return []
        try:
            page = parse_page(self.api.retrieve_page(page_id))
        except (NotionError, ValueError) as e:
            logger.error(f"Failed to retrieve parent page {page_id}: {e}")
            return []
        return self.get_page_breadcrumbs(page, depth=depth)

    def _database_breadcrumbs(self, database_id: str, depth: int) -> List[str]:
        try:
            database = parse_database(self.api.retrieve_database(database_id))
        except (NotionError, ValueError) as e:
            logger.error(f"Failed to retrieve parent database {database_id}: {e}")
            return []

        if isinstance(database, UnresolvableObject):
            logger.error(f"parent not found in database {database.object_id}")
            return []

        if database.parent.kind is not ParentKind.PAGE or depth <= 0:
            return []

        # The database is not shown, so its level does not consume depth.
        return self._page_breadcrumbs(database.parent.target_id, depth)
