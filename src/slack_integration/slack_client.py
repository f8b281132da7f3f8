"""Minimal Slack Web API client for link unfurls and thread replies.

Slack reports method failures in the response body ({"ok": false, "error":
...}) with HTTP 200, so both the status and the body are checked. Calls are
not retried.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .errors import SlackAPIError, SlackUnreachableError

logger = logging.getLogger(__name__)

SLACK_API_URL = 'https://slack.com/api'


class SlackClient:
    """Calls chat.unfurl and chat.postMessage with a bot token.

    Example:
        >>> slack = SlackClient(token=auth.get_slack_bot_token())
        >>> slack.post_message("C123", "Decided!", thread_ts="1700000000.000100")
    """

    def __init__(
        self,
        token: str,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        self._token = token
        self._session = session or requests.Session()
        self._timeout = timeout

    def _call(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload to a Web API method.

        Raises:
            SlackUnreachableError: On transport errors or non-JSON responses
            SlackAPIError: If the response body has ok=false
        """
        try:
            response = self._session.post(
                f"{SLACK_API_URL}/{method}",
                json=payload,
                headers={
                    'Authorization': f"Bearer {self._token}",
                    'Content-Type': 'application/json; charset=utf-8',
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise SlackUnreachableError(method, str(e)) from e
        except ValueError as e:
            raise SlackUnreachableError(method, f"invalid JSON response: {e}") from e

        if not isinstance(body, dict) or not body.get('ok'):
            error = body.get('error', 'unknown_error') if isinstance(body, dict) else 'unknown_error'
            raise SlackAPIError(method, error)

        logger.debug(f"Slack API {method} succeeded")
        return body

    def unfurl(self, channel: str, ts: str, unfurls: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        """Attach previews to a message.

        Args:
            channel: Channel of the message
            ts: Message timestamp
            unfurls: Mapping from the URL exactly as shared to its attachment
        """
        return self._call('chat.unfurl', {
            'channel': channel,
            'ts': ts,
            'unfurls': unfurls,
        })

    def post_message(self, channel: str, text: str, thread_ts: Optional[str] = None) -> Dict[str, Any]:
        """Post a message, as a thread reply when thread_ts is given."""
        payload: Dict[str, Any] = {'channel': channel, 'text': text}
        if thread_ts:
            payload['thread_ts'] = thread_ts
        return self._call('chat.postMessage', payload)
