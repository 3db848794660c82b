"""Utility modules."""

from .errors import (
    GHApiCliError,
    ConfigurationError,
    GitHubAPIError,
    GitHubServiceError,
    RateLimitExceededError,
    ParseError,
    ValidationError,
    normalize_error,
)

__all__ = [
    "GHApiCliError",
    "ConfigurationError",
    "GitHubAPIError",
    "GitHubServiceError",
    "RateLimitExceededError",
    "ParseError",
    "ValidationError",
    "normalize_error",
]
