"""Public-visibility check through Notion's internal loadPageChunk endpoint.

The public API does not expose sharing settings, so this module reads the
permission records returned by the endpoint the Notion web client uses. The
response shape is undocumented: every lookup is defensive and any surprise
resolves to "not public".
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

LOAD_PAGE_CHUNK_URL = 'https://www.notion.so/api/v3/loadPageChunk'
DEFAULT_SPACE_ID = 'f4012e63-3e93-4948-a7a2-609936dee3d3'

PUBLIC_ROLE = 'editor'
PUBLIC_PERMISSION_TYPES = frozenset({'space_permission', 'explicit_team_permission'})


def to_dashed_uuid(page_id: str) -> str:
    """Return the canonical dashed form of a (possibly dash-less) UUID.

    Raises:
        ValueError: If page_id is not a UUID
    """
    return str(uuid.UUID(page_id))


def find_first_permissions(record_map: Any) -> List[Dict[str, Any]]:
    """Return the first non-empty permissions list among block records.

    Records are scanned in mapping order; the first match wins even if it is
    not the queried page's own record.
    """
    if not isinstance(record_map, dict):
        return []
    blocks = record_map.get('block')
    if not isinstance(blocks, dict):
        return []

    for record in blocks.values():
        value = record.get('value') if isinstance(record, dict) else None
        if not isinstance(value, dict):
            continue
        permissions = value.get('permissions')
        if isinstance(permissions, list) and permissions:
            return permissions
    return []


def is_public_permission(permission: Any) -> bool:
    """True for an editor permission granted to the whole space or a team."""
    return (
        isinstance(permission, dict)
        and permission.get('role') == PUBLIC_ROLE
        and permission.get('type') in PUBLIC_PERMISSION_TYPES
    )


class VisibilityChecker:
    """Decides whether a page is readable by anyone in the workspace.

    Example:
        >>> checker = VisibilityChecker(cookie_token=auth.get_notion_cookie_token())
        >>> checker.is_page_public("571bb99b29e040eb8a46c2f9b7d138af")
        True
    """

    def __init__(
        self,
        cookie_token: str,
        space_id: str = DEFAULT_SPACE_ID,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        """Initialize the checker.

        Args:
            cookie_token: Value of the Cookie header for notion.so
            space_id: Workspace id sent with every request
            session: Optional requests session (a new one is created otherwise)
            timeout: Request timeout in seconds
        """
        self._cookie_token = cookie_token
        self._space_id = space_id
        self._session = session or requests.Session()
        self._timeout = timeout

    def _build_request_body(self, page_uuid: str) -> Dict[str, Any]:
        return {
            'page': {
                'id': page_uuid,
                'spaceId': self._space_id,
            },
            'limit': 30,
            'cursor': {
                'stack': [],
            },
            'chunkNumber': 0,
            'verticalColumns': False,
        }

    def fetch_record_map(self, page_id: str) -> Optional[Dict[str, Any]]:
        """POST loadPageChunk once and return the parsed JSON body.

        Returns:
            The response dict, or None on any id, transport or decoding error
        """
        try:
            page_uuid = to_dashed_uuid(page_id)
        except ValueError:
            logger.error(f"Cannot check visibility of malformed page id {page_id}")
            return None

        try:
            response = self._session.post(
                LOAD_PAGE_CHUNK_URL,
                json=self._build_request_body(page_uuid),
                headers={
                    'content-type': 'application/json',
                    'cookie': self._cookie_token,
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.error(f"Permission check failed for page {page_uuid}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Permission check returned invalid JSON for page {page_uuid}: {e}")
            return None

        return body if isinstance(body, dict) else None

    def is_page_public(self, page_id: str) -> bool:
        """Return True if the page is shared with the whole workspace.

        Fails closed: any error or unexpected shape returns False.
        """
        body = self.fetch_record_map(page_id)
        if body is None:
            return False

        permissions = find_first_permissions(body.get('recordMap'))
        if not permissions:
            logger.debug(f"No permission records found for page {page_id}")
            return False

        return any(is_public_permission(p) for p in permissions)
