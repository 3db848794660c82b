"""GitHub API service: cache, rate limit gate, transport and error handling."""

import logging
import time
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

from .cache import ResponseCache
from .models import Contributor, GitHubRepository, GitHubUser, RateLimitStatus
from .pagination import PageRequest, collect
from .rate_limiter import RateLimitTracker
from .transport import HttpTransport
from ..config import DEFAULT_LIST_LIMIT, DEFAULT_REPOS_PER_PAGE, MAX_PAGE_SIZE, ServiceConfig
from ..utils.errors import ParseError, ValidationError, normalize_error

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Percent-encode one URL path segment; dot segments are rejected."""
    if value in ("", ".", ".."):
        raise ValidationError(f"Invalid path segment: {value!r}")
    return quote(value, safe="")


class GitHubService:
    """Read-only access to users, repositories, contributors and quota."""

    def __init__(
        self,
        config: ServiceConfig,
        transport: Optional[Any] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize GitHub service.

        Args:
            config: Service settings
            transport: Optional transport with a get(path, params) method
            clock: Current time in epoch seconds
            sleep: Used when waiting for a rate limit reset
        """
        self.config = config
        self.transport = transport or HttpTransport(
            base_url=config.base_url,
            token=config.token,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )
        self.rate_limiter = RateLimitTracker(
            refresher=self._fetch_rate_limit,
            threshold=config.rate_limit_threshold,
            fail_on_rate_limit=config.fail_on_rate_limit,
            clock=clock,
            sleep=sleep,
        )
        self.cache = ResponseCache(
            enabled=config.cache_enabled,
            ttl_seconds=config.cache_ttl_seconds,
            clock=clock,
        )

    def __enter__(self) -> "GitHubService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make one rate-limit-gated API call."""
        self.rate_limiter.check_before_call()
        try:
            return self.transport.get(path, params)
        finally:
            self.rate_limiter.record_call()

    def _fetch_rate_limit(self) -> RateLimitStatus:
        # The rate_limit endpoint does not count against the quota.
        return RateLimitStatus.from_api(self.transport.get("/rate_limit"))

    def get_user(self, username: str) -> GitHubUser:
        """
        Get a user profile.

        Args:
            username: GitHub login

        Returns:
            User profile
        """
        try:
            return self.cache.with_cache(
                f"user:{username}",
                lambda: GitHubUser.from_api(self._request(f"/users/{_segment(username)}")),
            )
        except Exception as e:
            normalize_error(e, f"Failed to fetch user {username}")

    def get_repository(self, owner: str, name: str) -> GitHubRepository:
        """
        Get repository details.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            Repository metadata
        """
        try:
            return self.cache.with_cache(
                f"repo:{owner}/{name}",
                lambda: GitHubRepository.from_api(
                    self._request(f"/repos/{_segment(owner)}/{_segment(name)}")
                ),
            )
        except Exception as e:
            normalize_error(e, f"Failed to fetch repository {owner}/{name}")

    def list_user_repositories(
        self, username: str, per_page: int = DEFAULT_REPOS_PER_PAGE
    ) -> List[GitHubRepository]:
        """
        List a user's repositories, most recently updated first.

        Only the first page is fetched, sized by per_page. The cache key
        includes the page size ("userRepos:<username>:<per_page>"), so a
        different size is never served a cached list of another length.

        Args:
            username: GitHub login
            per_page: Number of repositories to return (max 100)

        Returns:
            List of repositories
        """

        def fetch() -> List[GitHubRepository]:
            data = self._request(
                f"/users/{_segment(username)}/repos",
                {
                    "per_page": per_page,
                    "sort": "updated",
                    "direction": "desc",
                },
            )
            if not isinstance(data, list):
                raise ParseError(
                    f"Expected a JSON array of repositories, got {type(data).__name__}"
                )
            return [GitHubRepository.from_api(item) for item in data]

        try:
            return self.cache.with_cache(f"userRepos:{username}:{per_page}", fetch)
        except Exception as e:
            normalize_error(e, f"Failed to fetch repositories for user {username}")

    def list_repository_contributors(
        self, owner: str, name: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[Contributor]:
        """
        List top contributors, most contributions first.

        Not cached; pages are fetched until limit is reached or the
        contributor list runs out.

        Args:
            owner: Repository owner
            name: Repository name
            limit: Maximum number of contributors

        Returns:
            List of contributors
        """

        def fetch_page(request: PageRequest) -> List[Contributor]:
            data = self._request(
                f"/repos/{_segment(owner)}/{_segment(name)}/contributors",
                {
                    "per_page": request.items_per_page,
                    "page": request.page_number,
                    "sort": "contributions",
                    "direction": "desc",
                },
            )
            # An empty repository answers 204 with no body
            if data is None:
                return []
            if not isinstance(data, list):
                raise ParseError(
                    f"Expected a JSON array of contributors, got {type(data).__name__}"
                )
            return [Contributor.from_api(item) for item in data]

        try:
            return collect(limit, fetch_page, page_size=MAX_PAGE_SIZE)
        except Exception as e:
            normalize_error(e, f"Failed to fetch contributors for {owner}/{name}")

    def get_rate_limit_status(self) -> RateLimitStatus:
        """
        Get authoritative quota status; never cached.

        Also overwrites the tracker's state.

        Returns:
            Rate limit status
        """
        try:
            status = self._fetch_rate_limit()
        except Exception as e:
            normalize_error(e, "Failed to fetch rate limit")
        self.rate_limiter.update(status.remaining, status.reset)
        return status
