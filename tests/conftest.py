"""Shared fixtures for gh-api-cli tests."""

import json

import pytest
import requests

from gh_api_cli.config import ServiceConfig

NOW = 1_700_000_000


class FakeClock:
    """Controllable clock; sleeping advances time instead of blocking."""

    def __init__(self, now: float = NOW):
        self.now = now
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTransport:
    """Transport double routing paths to canned payloads.

    A route value may be a payload, an exception instance (raised), or a
    callable taking the query params and returning a payload.
    """

    def __init__(self, routes=None):
        self.routes = {
            "/rate_limit": {"rate": {"limit": 5000, "remaining": 4999, "reset": NOW + 3600}},
        }
        self.routes.update(routes or {})
        self.calls = []
        self.closed = False

    def get(self, path, params=None):
        self.calls.append((path, params))
        if path not in self.routes:
            raise http_error(404, {"message": "Not Found"})
        route = self.routes[path]
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(params)
        return route

    def calls_to(self, path):
        return [params for called_path, params in self.calls if called_path == path]

    def close(self):
        self.closed = True


def http_error(status_code, body=None):
    """Build a requests.HTTPError carrying a real Response."""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode() if body is not None else b""
    return requests.HTTPError(f"{status_code} Client Error", response=response)


def user_payload(login="octocat", **extra):
    data = {
        "login": login,
        "id": 1,
        "avatar_url": "https://avatars.githubusercontent.com/u/1",
        "url": f"https://api.github.com/users/{login}",
        "html_url": f"https://github.com/{login}",
        "name": "The Octocat",
        "company": "@github",
        "blog": "https://github.blog",
        "location": "San Francisco",
        "email": None,
        "bio": None,
        "public_repos": 8,
        "public_gists": 8,
        "followers": 9000,
        "following": 9,
        "created_at": "2011-01-25T18:44:36Z",
        "updated_at": "2024-01-22T12:13:44Z",
    }
    data.update(extra)
    return data


def repo_payload(owner="octocat", name="Hello-World", **extra):
    data = {
        "id": 1296269,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner, "id": 1, "avatar_url": ""},
        "private": False,
        "html_url": f"https://github.com/{owner}/{name}",
        "description": "My first repository on GitHub!",
        "fork": False,
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2024-01-01T00:00:00Z",
        "pushed_at": "2023-12-31T00:00:00Z",
        "stargazers_count": 80,
        "watchers_count": 80,
        "forks_count": 9,
        "open_issues_count": 0,
        "language": "C",
        "license": {"key": "mit", "name": "MIT License"},
    }
    data.update(extra)
    return data


def contributor_payload(login, contributions):
    return {
        "login": login,
        "id": len(login),
        "contributions": contributions,
        "html_url": f"https://github.com/{login}",
        "avatar_url": "",
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def config():
    return ServiceConfig(token="test-token", cache_enabled=True, cache_ttl_seconds=60)


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    monkeypatch.setattr("gh_api_cli.config.load_dotenv", lambda *args, **kwargs: False)
