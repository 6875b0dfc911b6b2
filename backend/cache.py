"""In-process result cache.

Entries are keyed by normalized URL and expire 24 hours after insertion.
Expired entries are evicted lazily, when they are next read.
A hit returns the stored AnalysisResult verbatim, original timestamp included.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from models import AnalysisResult

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class CacheEntry:
    result: AnalysisResult
    stored_at: float


class ResultCache:
    """TTL cache of analysis results with hit/miss counters."""

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self.ttl_seconds

    def get(self, key: str) -> AnalysisResult | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_expired(entry, self._clock()):
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                entry = None

            if entry is None:
                self._misses += 1
                return None

            self._hits += 1
            return entry.result

    def put(self, key: str, result: AnalysisResult) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(result=result, stored_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for entry in self._entries.values() if not self._is_expired(entry, now))

    def stats(self) -> dict[str, int]:
        """Return entry count and hit/miss counters for the health endpoint."""
        keys = len(self)
        with self._lock:
            return {"keys": keys, "hits": self._hits, "misses": self._misses}
