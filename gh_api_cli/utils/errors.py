"""Custom exceptions for gh-api-cli."""

from typing import Any, NoReturn, Optional

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class GHApiCliError(Exception):
    """Base exception for gh-api-cli."""

    pass


class ConfigurationError(GHApiCliError):
    """Missing token or invalid client options."""

    pass


class GitHubAPIError(GHApiCliError):
    """GitHub API related errors."""

    pass


class GitHubServiceError(GitHubAPIError):
    """Normalized failure of a service operation.

    Attributes:
        context: What the operation was doing, e.g. "Failed to fetch user octocat"
        message: "<context>: <underlying message>"
        cause: The original failure
        status_code: HTTP status code, when the failure carried a response
    """

    def __init__(
        self,
        context: str,
        underlying_message: str,
        cause: Any = None,
        status_code: Optional[int] = None,
    ):
        self.context = context
        self.message = f"{context}: {underlying_message}"
        self.cause = cause
        self.status_code = status_code
        super().__init__(self.message)


class RateLimitExceededError(GitHubAPIError):
    """Local quota is exhausted and waiting for the reset is disabled."""

    def __init__(self, reset_epoch_seconds: int):
        self.reset_epoch_seconds = reset_epoch_seconds
        super().__init__(
            f"API rate limit exhausted, resets at epoch {reset_epoch_seconds}"
        )


class ParseError(GHApiCliError):
    """Error parsing an API response."""

    pass


class ValidationError(GHApiCliError):
    """Input validation error."""

    pass


def _response_message(response: Any) -> Optional[str]:
    """Pull the human-readable ``message`` field out of an error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


def normalize_error(error: Any, context: str) -> NoReturn:
    """
    Convert any failure into a GitHubServiceError and raise it.

    Args:
        error: The caught failure (anything, not necessarily an exception)
        context: Description of the failed operation

    Raises:
        GitHubServiceError: Always
    """
    if isinstance(error, GitHubServiceError):
        raise error

    if not isinstance(error, BaseException):
        raise GitHubServiceError(context, UNKNOWN_ERROR_MESSAGE, cause=error)

    response = getattr(error, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        message = _response_message(response) or str(error)
        raise GitHubServiceError(
            context, message, cause=error, status_code=status_code
        ) from error

    message = str(error) or type(error).__name__
    raise GitHubServiceError(context, message, cause=error) from error
