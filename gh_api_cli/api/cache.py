"""In-memory TTL cache for API responses."""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar

from ..config import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """Stored result and the instant (epoch ms) it stops being served."""

    key: str
    value: T
    expiry_epoch_millis: int


class ResponseCache:
    """
    Process-lifetime cache keyed by logical query.

    Entries are never evicted early and the map is unbounded; a stale entry
    is overwritten by the next fetch of its key.
    """

    def __init__(
        self,
        enabled: bool = False,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.enabled = enabled
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: Dict[str, CacheEntry[Any]] = {}

    def _now_millis(self) -> int:
        return int(self.clock() * 1000)

    def with_cache(self, key: str, producer: Callable[[], T]) -> T:
        """
        Return the cached value for key, or produce and store it.

        Args:
            key: Logical query key, e.g. "user:octocat"
            producer: Fetches the value on a miss

        Returns:
            Cached or freshly produced value
        """
        if not self.enabled:
            return producer()

        entry = self._entries.get(key)
        if entry is not None and self._now_millis() < entry.expiry_epoch_millis:
            logger.debug("Cache hit: %s", key)
            return entry.value

        logger.debug("Cache miss: %s", key)
        value = producer()
        self._entries[key] = CacheEntry(
            key=key,
            value=value,
            expiry_epoch_millis=self._now_millis() + self.ttl_seconds * 1000,
        )
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
