"""Pytest configuration and fixtures for integration tests.

The full link_shared pipeline runs against mocked transports: a mocked
notion-client Client behind the real NotionAPIWrapper, and mocked requests
sessions behind the real VisibilityChecker and SlackClient.
"""

from typing import Any, Dict
from unittest.mock import Mock

import pytest
import requests

from src.notion_api.api_wrapper import NotionAPIWrapper
from src.notion_api.auth import Authenticator
from src.page_preview.page_resolver import PageResolver
from src.page_preview.visibility_checker import VisibilityChecker
from src.slack_integration.event_dispatcher import EventDispatcher
from src.slack_integration.guardian import SlackGuardian
from src.slack_integration.models import GuardianConfig
from src.slack_integration.slack_client import SlackClient
from src.slack_integration.unfurl_handler import LinkSharedHandler
from tests.fixtures.notion_responses import (
    DATABASE_ID,
    PAGE_ID,
    PARENT_PAGE_ID,
    SPACE_EDITOR_PERMISSION,
    block,
    children_response,
    database_parent,
    database_response,
    page_chunk_response,
    page_parent,
    page_response,
)

NESTED_BLOCK_ID = "1a2b3c4d5e6f708192a3b4c5d6e7f809"


def _lookup(responses: Dict[str, Any], key: str):
    if key not in responses:
        raise AssertionError(f"unexpected request for {key}")
    return responses[key]


@pytest.fixture
def notion_client() -> Mock:
    """Workspace: Team page > Decision log database > Plan page."""
    pages = {
        PAGE_ID: page_response(PAGE_ID, "Plan", parent=database_parent(DATABASE_ID)),
        PARENT_PAGE_ID: page_response(PARENT_PAGE_ID, "Team"),
    }
    databases = {
        DATABASE_ID: database_response(DATABASE_ID, parent=page_parent(PARENT_PAGE_ID)),
    }
    children = {
        PAGE_ID: children_response(
            block("heading_1", "Goals", block_id="h1"),
            block("bulleted_list_item", "Ship it", block_id=NESTED_BLOCK_ID, has_children=True),
            block("to_do", "Write docs", block_id="t1", checked=False),
        ),
        NESTED_BLOCK_ID: children_response(block("paragraph", "by Friday", block_id="p1")),
    }

    client = Mock()
    client.pages.retrieve.side_effect = lambda page_id: _lookup(pages, page_id)
    client.databases.retrieve.side_effect = lambda database_id: _lookup(databases, database_id)
    client.blocks.children.list.side_effect = lambda block_id: _lookup(children, block_id)
    client.pages.properties.retrieve.return_value = {
        "object": "property_item",
        "type": "select",
        "select": {"name": "Go"},
    }
    return client


def _json_response(body: Dict[str, Any]) -> Mock:
    response = Mock()
    response.json.return_value = body
    return response


@pytest.fixture
def notion_session() -> Mock:
    session = Mock(spec=requests.Session)
    session.post.return_value = _json_response(page_chunk_response([SPACE_EDITOR_PERMISSION]))
    return session


@pytest.fixture
def slack_session() -> Mock:
    session = Mock(spec=requests.Session)
    session.post.return_value = _json_response({"ok": True})
    return session


@pytest.fixture
def api(notion_client) -> NotionAPIWrapper:
    return NotionAPIWrapper(Mock(spec=Authenticator), client=notion_client)


@pytest.fixture
def slack(slack_session) -> SlackClient:
    return SlackClient(token="xoxb-test", session=slack_session)


@pytest.fixture
def resolver(api, notion_session) -> PageResolver:
    return PageResolver(api, VisibilityChecker(cookie_token="token_v2=abc", session=notion_session))


@pytest.fixture
def dispatcher(api, slack, resolver) -> EventDispatcher:
    guardian = SlackGuardian(api, slack, GuardianConfig(
        channels=["C0123456789"],
        message="Accepted ADR: announce it in #architecture",
        adr_database_id=DATABASE_ID,
    ))
    return EventDispatcher(LinkSharedHandler(resolver, slack), guardian=guardian)
