"""Data models for GitHub API responses."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..utils.errors import ParseError


def _require_object(data: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object for {kind}, got {type(data).__name__}")
    return data


def _require(data: Dict[str, Any], key: str, kind: str) -> Any:
    if data.get(key) is None:
        raise ParseError(f"Missing required field '{key}' in {kind} response")
    return data[key]


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse GitHub's ISO 8601 timestamps ("2011-01-25T18:44:36Z")."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class GitHubUser:
    """User profile."""

    login: str
    id: int
    avatar_url: str
    url: str
    html_url: str
    public_repos: int
    public_gists: int
    followers: int
    following: int
    created_at: str
    updated_at: str
    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "GitHubUser":
        data = _require_object(data, "user")
        return cls(
            login=_require(data, "login", "user"),
            id=_require(data, "id", "user"),
            avatar_url=data.get("avatar_url", ""),
            url=data.get("url", ""),
            html_url=data.get("html_url", ""),
            public_repos=data.get("public_repos", 0),
            public_gists=data.get("public_gists", 0),
            followers=data.get("followers", 0),
            following=data.get("following", 0),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            name=data.get("name"),
            company=data.get("company"),
            blog=data.get("blog"),
            location=data.get("location"),
            email=data.get("email"),
            bio=data.get("bio"),
        )

    @property
    def created(self) -> Optional[datetime]:
        return _parse_timestamp(self.created_at)


@dataclass
class RepositoryOwner:
    """Owner summary embedded in a repository."""

    login: str
    id: int
    avatar_url: str = ""


@dataclass
class RepositoryLicense:
    """License summary embedded in a repository."""

    key: str
    name: str


@dataclass
class GitHubRepository:
    """Repository metadata."""

    id: int
    name: str
    full_name: str
    owner: RepositoryOwner
    html_url: str
    private: bool = False
    fork: bool = False
    description: Optional[str] = None
    url: str = ""
    clone_url: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    pushed_at: Optional[str] = None
    size: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    language: Optional[str] = None
    license: Optional[RepositoryLicense] = None

    @classmethod
    def from_api(cls, data: Any) -> "GitHubRepository":
        data = _require_object(data, "repository")
        owner_data = _require_object(_require(data, "owner", "repository"), "repository owner")
        license_data = data.get("license")
        return cls(
            id=_require(data, "id", "repository"),
            name=_require(data, "name", "repository"),
            full_name=data.get("full_name") or f"{owner_data.get('login', '')}/{data['name']}",
            owner=RepositoryOwner(
                login=_require(owner_data, "login", "repository owner"),
                id=owner_data.get("id", 0),
                avatar_url=owner_data.get("avatar_url", ""),
            ),
            html_url=data.get("html_url", ""),
            private=data.get("private", False),
            fork=data.get("fork", False),
            description=data.get("description"),
            url=data.get("url", ""),
            clone_url=data.get("clone_url", ""),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            pushed_at=data.get("pushed_at"),
            size=data.get("size", 0),
            stargazers_count=data.get("stargazers_count", 0),
            watchers_count=data.get("watchers_count", 0),
            forks_count=data.get("forks_count", 0),
            open_issues_count=data.get("open_issues_count", 0),
            language=data.get("language"),
            license=(
                RepositoryLicense(key=license_data.get("key", ""), name=license_data.get("name", ""))
                if isinstance(license_data, dict)
                else None
            ),
        )

    @property
    def created(self) -> Optional[datetime]:
        return _parse_timestamp(self.created_at)

    @property
    def updated(self) -> Optional[datetime]:
        return _parse_timestamp(self.updated_at)


@dataclass
class Contributor:
    """Repository contributor."""

    login: str
    contributions: int
    html_url: str = ""
    avatar_url: str = ""
    id: Optional[int] = None

    @classmethod
    def from_api(cls, data: Any) -> "Contributor":
        data = _require_object(data, "contributor")
        return cls(
            login=_require(data, "login", "contributor"),
            contributions=data.get("contributions", 0),
            html_url=data.get("html_url", ""),
            avatar_url=data.get("avatar_url", ""),
            id=data.get("id"),
        )


@dataclass
class RateLimitStatus:
    """Core API quota from the rate_limit endpoint."""

    limit: int
    remaining: int
    reset: int  # Unix epoch seconds

    @classmethod
    def from_api(cls, data: Any) -> "RateLimitStatus":
        data = _require_object(data, "rate limit")
        rate = _require_object(_require(data, "rate", "rate limit"), "rate limit")
        return cls(
            limit=int(_require(rate, "limit", "rate limit")),
            remaining=int(_require(rate, "remaining", "rate limit")),
            reset=int(_require(rate, "reset", "rate limit")),
        )

    @property
    def reset_at(self) -> datetime:
        """Reset instant as an aware UTC datetime."""
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)
