"""Configuration constants and service settings."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .utils.errors import ConfigurationError

# Environment variables
TOKEN_ENV_VAR = "GITHUB_TOKEN"
BASE_URL_ENV_VAR = "GITHUB_API_URL"

# API configuration
DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "GitHub-API-Client"
DEFAULT_TIMEOUT = 30  # seconds
ACCEPT_HEADER = "application/vnd.github+json"

# Rate limit configuration
DEFAULT_RATE_LIMIT_THRESHOLD = 100  # remaining calls below which state is refreshed
RATE_LIMIT_RESET_BUFFER = 1  # seconds added to the reset instant before resuming

# Cache configuration
DEFAULT_CACHE_TTL_SECONDS = 300

# Listing configuration
MAX_PAGE_SIZE = 100  # GitHub max per_page
DEFAULT_REPOS_PER_PAGE = 30
DEFAULT_LIST_LIMIT = 10


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable settings for a GitHubService instance."""

    token: str
    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_BASE_URL
    cache_enabled: bool = False
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    rate_limit_threshold: int = DEFAULT_RATE_LIMIT_THRESHOLD
    fail_on_rate_limit: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        """Validate settings."""
        if not isinstance(self.token, str) or not self.token.strip():
            raise ConfigurationError(f"{TOKEN_ENV_VAR} must be a non-empty string")
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.cache_ttl_seconds < 0:
            raise ConfigurationError("cache_ttl_seconds cannot be negative")
        if self.rate_limit_threshold < 0:
            raise ConfigurationError("rate_limit_threshold cannot be negative")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_env(cls, token: Optional[str] = None, **overrides) -> "ServiceConfig":
        """
        Build settings from the environment (and a .env file, if present).

        Args:
            token: Token overriding GITHUB_TOKEN
            **overrides: Any other ServiceConfig field

        Returns:
            Validated ServiceConfig

        Raises:
            ConfigurationError: If no token is available
        """
        load_dotenv()

        if token is None:
            token = os.getenv(TOKEN_ENV_VAR)
        if not token:
            raise ConfigurationError(
                f"GitHub token required. Set {TOKEN_ENV_VAR} environment variable "
                "or pass --token."
            )

        base_url = os.getenv(BASE_URL_ENV_VAR)
        if base_url and "base_url" not in overrides:
            overrides["base_url"] = base_url

        return cls(token=token, **overrides)
