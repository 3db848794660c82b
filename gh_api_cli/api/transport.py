"""HTTP transport for the GitHub REST API."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import ACCEPT_HEADER, DEFAULT_TIMEOUT
from ..utils.errors import ParseError

logger = logging.getLogger(__name__)


class HttpTransport:
    """Thin wrapper around a requests session bound to one API base URL."""

    def __init__(
        self,
        base_url: str,
        token: str,
        user_agent: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize transport.

        Args:
            base_url: API root, e.g. https://api.github.com
            token: Bearer token sent with every request
            user_agent: User-Agent header value
            timeout: Per-request timeout in seconds
            session: Optional pre-built session
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": ACCEPT_HEADER,
                "User-Agent": user_agent,
            }
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Perform a GET request and return the decoded JSON body.

        Args:
            path: Endpoint path relative to the base URL
            params: Optional query parameters

        Returns:
            Parsed JSON (dict or list), or None for an empty body

        Raises:
            requests.HTTPError: On a non-2xx response
            requests.RequestException: On connection failures
            ParseError: If the body is not valid JSON
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)

        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON response from {path}: {e}") from e

    def close(self) -> None:
        self.session.close()
