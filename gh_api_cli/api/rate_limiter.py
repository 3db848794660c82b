"""Rate limit tracking for GitHub API calls."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .models import RateLimitStatus
from ..config import DEFAULT_RATE_LIMIT_THRESHOLD, RATE_LIMIT_RESET_BUFFER
from ..utils.errors import RateLimitExceededError

logger = logging.getLogger(__name__)


@dataclass
class RateLimitState:
    """Believed remaining quota and reset time; None means unknown."""

    remaining: Optional[int] = None
    reset_epoch_seconds: Optional[int] = None


class RateLimitTracker:
    """Gate outbound calls on the believed remaining API quota."""

    def __init__(
        self,
        refresher: Callable[[], RateLimitStatus],
        threshold: int = DEFAULT_RATE_LIMIT_THRESHOLD,
        fail_on_rate_limit: bool = False,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize rate limit tracker.

        Args:
            refresher: Fetches authoritative quota status (not gated)
            threshold: Remaining calls at or below which state is refreshed
            fail_on_rate_limit: Raise instead of waiting when quota is exhausted
            clock: Returns current time in epoch seconds
            sleep: Blocks for the given number of seconds
        """
        self.refresher = refresher
        self.threshold = threshold
        self.fail_on_rate_limit = fail_on_rate_limit
        self.clock = clock
        self.sleep = sleep
        self.state = RateLimitState()
        self._refresh_pending = False

    def check_before_call(self) -> None:
        """
        Decide whether the next call may proceed.

        A refresh requested by the previous call runs first, so the decision
        uses the refreshed state.

        Raises:
            RateLimitExceededError: If quota is exhausted and failing is configured
        """
        if self._refresh_pending:
            self.refresh()

        remaining = self.state.remaining
        if remaining is None or remaining > self.threshold:
            return

        reset = self.state.reset_epoch_seconds
        now = self.clock()
        if remaining <= 0 and reset is not None and reset > now:
            if self.fail_on_rate_limit:
                raise RateLimitExceededError(reset)
            wait_time = reset + RATE_LIMIT_RESET_BUFFER - now
            logger.warning(
                "Rate limit exhausted. Waiting %.1fs until reset", wait_time
            )
            self.sleep(wait_time)

        self._refresh_pending = True

    def record_call(self) -> None:
        """Account for a completed call; never calls the API itself."""
        if self.state.remaining is None:
            self._refresh_pending = True
            return

        self.state.remaining = max(0, self.state.remaining - 1)

    def refresh(self) -> None:
        """Reload authoritative quota; failures are logged, not raised."""
        self._refresh_pending = False
        try:
            status = self.refresher()
        except Exception as e:
            logger.info("Rate limit refresh failed: %s", e)
            self.state = RateLimitState()
            return
        self.update(status.remaining, status.reset)

    def update(self, remaining: int, reset_epoch_seconds: int) -> None:
        """Overwrite state with an authoritative reading."""
        self._refresh_pending = False
        self.state = RateLimitState(
            remaining=remaining, reset_epoch_seconds=reset_epoch_seconds
        )
        if remaining <= self.threshold:
            logger.info(
                "Rate limit status: %d requests remaining, resets at %d",
                remaining,
                reset_epoch_seconds,
            )
