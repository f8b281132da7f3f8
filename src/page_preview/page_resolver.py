"""Shared-link resolution into link preview payloads.

PageResolver ties the preview pipeline together for one URL: id extraction,
the visibility gate, then breadcrumbs and body rendering in parallel.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from src.models.preview import PreviewPayload
from src.notion_api.api_wrapper import NotionAPIWrapper
from .body_walker import DEFAULT_BLOCK_COUNT, DEFAULT_BODY_DEPTH, BodyWalker
from .breadcrumb_walker import DEFAULT_BREADCRUMBS_DEPTH, BreadcrumbWalker
from .heading_formatter import format_headings
from .url_resolver import get_page_id_from_url
from .visibility_checker import VisibilityChecker

logger = logging.getLogger(__name__)


@dataclass
class PreviewOptions:
    """Traversal budgets for one preview.

    Attributes:
        block_count: Maximum blocks rendered per nesting level
        body_depth: Maximum nesting levels expanded in the body
        breadcrumbs_depth: Maximum levels in the breadcrumb trail
    """
    block_count: int = DEFAULT_BLOCK_COUNT
    body_depth: int = DEFAULT_BODY_DEPTH
    breadcrumbs_depth: int = DEFAULT_BREADCRUMBS_DEPTH


class PageResolver:
    """Resolves shared Notion URLs into PreviewPayloads.

    Example:
        >>> resolver = PageResolver(api, VisibilityChecker(cookie))
        >>> payload = resolver.resolve("https://www.notion.so/team/Plan-571bb99b29e040eb8a46c2f9b7d138af")
        >>> payload.footer
        'Team / Plan'
    """

    def __init__(
        self,
        api: NotionAPIWrapper,
        visibility_checker: Optional[VisibilityChecker],
        options: Optional[PreviewOptions] = None,
    ):
        self.api = api
        self.visibility_checker = visibility_checker
        self.options = options or PreviewOptions()
        self.breadcrumb_walker = BreadcrumbWalker(api)
        self.body_walker = BodyWalker(api)

    def resolve(self, url: str) -> Optional[PreviewPayload]:
        """Build the preview for a shared URL.

        Args:
            url: The URL exactly as shared; it is sanitized for parsing but
                kept verbatim as the payload's title_link

        Returns:
            The payload, or None when the URL has no page id or the page is
            not public (always None without a visibility checker)

        Raises:
            NotionError: If the page itself cannot be retrieved
            ValueError: If the extracted page id is malformed
        """
        page_id = get_page_id_from_url(url)
        if page_id is None:
            logger.error(f"PageId not found in {url}")
            return None

        if self.visibility_checker is None or not self.visibility_checker.is_page_public(page_id):
            logger.info(f"Page is not public: {url}")
            return None

        return self.build_preview(page_id, url)

    def build_preview(self, page_id: str, title_link: str) -> PreviewPayload:
        """Resolve title, breadcrumbs and body of a page without a visibility check."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            page_data_future = executor.submit(
                self.breadcrumb_walker.get_page_data,
                page_id,
                depth=self.options.breadcrumbs_depth,
            )
            body_future = executor.submit(
                self.body_walker.get_page_body,
                page_id,
                block_count=self.options.block_count,
                depth=self.options.body_depth,
            )
            page_data = page_data_future.result()
            body = body_future.result()

        logger.debug(
            f"Resolved page {page_id}: '{page_data.title}' "
            f"with {len(page_data.breadcrumbs)} breadcrumbs"
        )

        return PreviewPayload(
            title=page_data.title,
            text=format_headings(body),
            breadcrumbs=page_data.breadcrumbs,
            title_link=title_link,
        )
