"""GitHub API client module."""

from .cache import ResponseCache
from .github_client import GitHubService
from .models import Contributor, GitHubRepository, GitHubUser, RateLimitStatus
from .pagination import collect
from .rate_limiter import RateLimitState, RateLimitTracker
from .transport import HttpTransport

__all__ = [
    "GitHubService",
    "HttpTransport",
    "RateLimitTracker",
    "RateLimitState",
    "ResponseCache",
    "collect",
    "GitHubUser",
    "GitHubRepository",
    "Contributor",
    "RateLimitStatus",
]
