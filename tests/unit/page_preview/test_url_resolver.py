"""Unit tests for page_preview.url_resolver module."""

import pytest

from src.page_preview.url_resolver import (
    get_page_id_from_url,
    is_notion_domain,
    sanitize_link,
)


class TestSanitizeLink:
    """Test cases for sanitize_link."""

    def test_removes_double_escaped_ampersand(self):
        """'&amp;' becomes '&'."""
        url = "https://www.notion.so/team/Plan-abc?v=1&amp;p=def"
        assert sanitize_link(url) == "https://www.notion.so/team/Plan-abc?v=1&p=def"

    def test_removes_every_occurrence(self):
        """All 'amp;' occurrences are removed, not just the first."""
        url = "https://www.notion.so/x?a=1&amp;b=2&amp;c=3amp;"
        assert "amp;" not in sanitize_link(url)

    def test_url_without_escape_is_unchanged(self):
        """Clean URLs pass through unchanged."""
        url = "https://www.notion.so/team/Plan-abc"
        assert sanitize_link(url) == url


class TestIsNotionDomain:
    """Test cases for is_notion_domain."""

    @pytest.mark.parametrize("domain", ["notion.so", "www.notion.so"])
    def test_notion_domains(self, domain):
        assert is_notion_domain(domain) is True

    @pytest.mark.parametrize("domain", ["example.com", "github.com", ""])
    def test_other_domains(self, domain):
        assert is_notion_domain(domain) is False


class TestGetPageIdFromUrl:
    """Test cases for get_page_id_from_url."""

    def test_modal_query_parameter(self):
        """The 'p' query parameter wins over the path."""
        url = (
            "https://www.notion.so/example/my-title-571bb99b29e040eb8a46c2f9b7d138af"
            "?p=5daca1bba9ce4ed0bf7a5d348ac9a81d"
        )
        assert get_page_id_from_url(url) == "5daca1bba9ce4ed0bf7a5d348ac9a81d"

    def test_query_parameter_returned_verbatim(self):
        """Query ids are not normalized."""
        assert get_page_id_from_url("https://www.notion.so/workspace/page?p=ID") == "ID"

    def test_slug_suffixed_path(self):
        """Without a query the id is the last '-' part of the last segment."""
        assert get_page_id_from_url("https://www.notion.so/ws/my-title-ABC123") == "ABC123"

    def test_bare_id_path(self):
        """A segment without dashes is the id itself."""
        url = "https://www.notion.so/571bb99b29e040eb8a46c2f9b7d138af"
        assert get_page_id_from_url(url) == "571bb99b29e040eb8a46c2f9b7d138af"

    def test_trailing_slash_uses_last_non_empty_segment(self):
        assert get_page_id_from_url("https://www.notion.so/ws/my-title-ABC123/") == "ABC123"

    def test_double_escaped_query_is_repaired(self):
        """'&amp;p=' is parsed as the 'p' parameter after sanitization."""
        url = "https://www.notion.so/ws/Board-AAA?v=123&amp;p=BBB"
        assert get_page_id_from_url(url) == "BBB"

    def test_empty_query_parameter_falls_back_to_path(self):
        assert get_page_id_from_url("https://www.notion.so/ws/title-XYZ?p=") == "XYZ"

    def test_no_path_returns_none(self):
        """A URL without any path segment has no page id."""
        assert get_page_id_from_url("https://www.notion.so/") is None
        assert get_page_id_from_url("https://www.notion.so") is None

    def test_segment_ending_with_dash_returns_none(self):
        """An empty trailing component is not an id."""
        assert get_page_id_from_url("https://www.notion.so/ws/title-") is None
