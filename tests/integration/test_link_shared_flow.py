"""Integration tests for the link_shared pipeline.

Covers URL parsing, the visibility gate, breadcrumb and body walking,
attachment rendering and Slack delivery together.
"""

import pytest

from src.page_preview.visibility_checker import LOAD_PAGE_CHUNK_URL
from tests.fixtures.notion_responses import (
    PAGE_ID,
    PAGE_URL,
    SPACE_READER_PERMISSION,
    link_shared_payload,
    page_chunk_response,
)


def posted_calls(session, method):
    return [
        call for call in session.post.call_args_list
        if call.args[0] == f"https://slack.com/api/{method}"
    ]


@pytest.mark.integration
class TestLinkSharedFlow:

    def test_preview_from_url(self, resolver, notion_session):
        payload = resolver.resolve(PAGE_URL)

        assert payload.title == "Plan"
        assert payload.breadcrumbs == ["Team", "Plan"]
        assert payload.text == "*Goals*\n・Ship it\n    by Friday\n- [ ] Write docs\n"
        assert payload.title_link == PAGE_URL

        args, kwargs = notion_session.post.call_args
        assert args[0] == LOAD_PAGE_CHUNK_URL
        assert kwargs["json"]["page"]["id"] == "571bb99b-29e0-40eb-8a46-c2f9b7d138af"

    def test_event_unfurls_and_guardian_replies(self, dispatcher, slack_session):
        shared_url = f"https://www.notion.so/team/Decisions?v=1&amp;p={PAGE_ID}"
        payload = link_shared_payload([
            (shared_url, "www.notion.so"),
            ("https://example.com/doc", "example.com"),
        ])

        result = dispatcher.dispatch(payload)

        assert result == {"unfurled": [shared_url], "guardian_replied": True}

        unfurl_calls = posted_calls(slack_session, "chat.unfurl")
        assert len(unfurl_calls) == 1
        attachment = unfurl_calls[0].kwargs["json"]["unfurls"][shared_url]
        assert attachment["footer"] == "Team / Plan"
        assert attachment["title_link"] == shared_url

        reply_calls = posted_calls(slack_session, "chat.postMessage")
        assert len(reply_calls) == 1
        assert reply_calls[0].kwargs["json"]["thread_ts"] == "1700000000.000100"

    def test_private_page_is_not_unfurled(self, dispatcher, notion_session, slack_session):
        notion_session.post.return_value.json.return_value = page_chunk_response(
            [SPACE_READER_PERMISSION]
        )

        result = dispatcher.dispatch(link_shared_payload([(PAGE_URL, "notion.so")]))

        assert result["unfurled"] == []
        assert posted_calls(slack_session, "chat.unfurl") == []

    def test_url_verification(self, dispatcher):
        assert dispatcher.dispatch({"type": "url_verification", "challenge": "xyz"}) == {
            "challenge": "xyz"
        }
