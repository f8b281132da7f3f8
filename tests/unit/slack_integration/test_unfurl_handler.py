"""Unit tests for slack_integration.unfurl_handler module."""

from unittest.mock import Mock

import pytest

from src.models.preview import PreviewPayload
from src.notion_api.errors import APIUnreachableError, PageNotFoundError
from src.page_preview.page_resolver import PageResolver
from src.slack_integration.errors import SlackAPIError
from src.slack_integration.models import LinkSharedEvent, SharedLink
from src.slack_integration.slack_client import SlackClient
from src.slack_integration.unfurl_handler import LinkSharedHandler
from tests.fixtures.notion_responses import PAGE_ID, PAGE_URL


def make_preview(url, title="Plan"):
    return PreviewPayload(title=title, text="body", breadcrumbs=[title], title_link=url)


def make_event(*links):
    return LinkSharedEvent(
        channel="C1",
        message_ts="1700000000.000100",
        links=[SharedLink(url=url, domain=domain) for url, domain in links],
    )


class TestLinkSharedHandler:

    @pytest.fixture
    def resolver(self):
        resolver = Mock(spec=PageResolver)
        resolver.resolve.side_effect = lambda url: make_preview(url)
        return resolver

    @pytest.fixture
    def slack(self):
        return Mock(spec=SlackClient)

    @pytest.fixture
    def handler(self, resolver, slack):
        return LinkSharedHandler(resolver, slack)

    def test_single_public_link_is_unfurled(self, handler, slack):
        unfurls = handler.handle(make_event((PAGE_URL, "notion.so")))

        assert list(unfurls) == [PAGE_URL]
        assert unfurls[PAGE_URL]["title"] == "Plan"
        slack.unfurl.assert_called_once_with(
            channel="C1",
            ts="1700000000.000100",
            unfurls=unfurls,
        )

    def test_non_notion_domain_skipped(self, handler, resolver, slack):
        unfurls = handler.handle(make_event(("https://example.com/x", "example.com")))

        assert unfurls == {}
        resolver.resolve.assert_not_called()
        slack.unfurl.assert_not_called()

    def test_key_is_url_as_shared(self, handler):
        url = f"https://www.notion.so/x?v=1&amp;p={PAGE_ID}"

        unfurls = handler.build_unfurls(make_event((url, "www.notion.so")))

        assert list(unfurls) == [url]

    def test_non_public_page_has_no_entry(self, handler, resolver):
        resolver.resolve.side_effect = None
        resolver.resolve.return_value = None

        assert handler.build_unfurls(make_event((PAGE_URL, "notion.so"))) == {}

    def test_failing_link_does_not_block_others(self, handler, resolver, caplog):
        other_url = "https://www.notion.so/other-5daca1bba9ce4ed0bf7a5d348ac9a81d"

        def resolve(url):
            if url == PAGE_URL:
                raise PageNotFoundError(PAGE_ID)
            return make_preview(url, title="Other")

        resolver.resolve.side_effect = resolve

        unfurls = handler.build_unfurls(
            make_event((PAGE_URL, "notion.so"), (other_url, "notion.so"))
        )

        assert list(unfurls) == [other_url]
        assert f"Failed to build preview for {PAGE_URL}" in caplog.text

    def test_malformed_id_is_skipped(self, handler, resolver):
        resolver.resolve.side_effect = ValueError("Invalid object id format")

        assert handler.build_unfurls(make_event((PAGE_URL, "notion.so"))) == {}

    def test_unreachable_api_is_skipped(self, handler, resolver):
        resolver.resolve.side_effect = APIUnreachableError("https://api.notion.com")

        assert handler.build_unfurls(make_event((PAGE_URL, "notion.so"))) == {}

    def test_delivery_failure_is_logged(self, handler, slack, caplog):
        slack.unfurl.side_effect = SlackAPIError("chat.unfurl", "cannot_unfurl_url")

        unfurls = handler.handle(make_event((PAGE_URL, "notion.so")))

        assert list(unfurls) == [PAGE_URL]
        assert "Failed to deliver unfurls" in caplog.text

    def test_empty_event_makes_no_call(self, handler, slack):
        assert handler.handle(make_event()) == {}
        slack.unfurl.assert_not_called()

    def test_unexpected_error_does_not_block_other_links(self, handler, resolver, slack, caplog):
        other_url = "https://www.notion.so/other-5daca1bba9ce4ed0bf7a5d348ac9a81d"

        def resolve(url):
            if url == PAGE_URL:
                raise TypeError("sequence item 0: expected str instance, NoneType found")
            return make_preview(url, title="Other")

        resolver.resolve.side_effect = resolve

        unfurls = handler.handle(
            make_event((PAGE_URL, "notion.so"), (other_url, "notion.so"))
        )

        assert list(unfurls) == [other_url]
        slack.unfurl.assert_called_once()
        assert f"Unexpected error building preview for {PAGE_URL}" in caplog.text
