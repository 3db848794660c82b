"""
Tests for the HTTP transport.
"""

from unittest.mock import Mock

import pytest
import requests

from conftest import http_error
from gh_api_cli.api.transport import HttpTransport
from gh_api_cli.utils.errors import ParseError


def _response(status_code=200, body=b"{}", payload=None):
    response = Mock()
    response.status_code = status_code
    response.content = body
    response.json.return_value = payload if payload is not None else {}
    return response


def _transport(response):
    session = Mock()
    session.headers = {}
    session.get.return_value = response
    transport = HttpTransport(
        base_url="https://api.github.com/",
        token="secret",
        user_agent="GitHub-API-Client",
        timeout=15,
        session=session,
    )
    return transport, session


class TestHttpTransport:
    """Test HttpTransport."""

    def test_headers(self):
        """Test that auth, accept and user agent headers are set."""
        _, session = _transport(_response())

        assert session.headers["Authorization"] == "Bearer secret"
        assert session.headers["Accept"] == "application/vnd.github+json"
        assert session.headers["User-Agent"] == "GitHub-API-Client"

    def test_get_builds_url_and_returns_json(self):
        """Test a successful GET."""
        transport, session = _transport(_response(payload={"login": "octocat"}))

        data = transport.get("/users/octocat", {"per_page": 5})

        assert data == {"login": "octocat"}
        session.get.assert_called_once_with(
            "https://api.github.com/users/octocat",
            params={"per_page": 5},
            timeout=15,
        )

    def test_http_error_propagates(self):
        """Test that non-2xx responses raise requests.HTTPError."""
        response = _response(status_code=404)
        response.raise_for_status.side_effect = http_error(404, {"message": "Not Found"})
        transport, _ = _transport(response)

        with pytest.raises(requests.HTTPError) as exc_info:
            transport.get("/users/ghost")

        assert exc_info.value.response.status_code == 404

    def test_no_content(self):
        """Test that an empty body yields None."""
        transport, _ = _transport(_response(status_code=204, body=b""))

        assert transport.get("/repos/o/empty/contributors") is None

    def test_invalid_json(self):
        """Test that a garbled body raises ParseError."""
        response = _response(body=b"<html>")
        response.json.side_effect = ValueError("Expecting value")
        transport, _ = _transport(response)

        with pytest.raises(ParseError, match="Invalid JSON response from /rate_limit"):
            transport.get("/rate_limit")

    def test_close(self):
        """Test that close releases the session."""
        transport, session = _transport(_response())

        transport.close()

        session.close.assert_called_once()
