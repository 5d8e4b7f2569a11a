"""
Result cache for analysis results

Time-bounded memoization keyed by request fingerprint:
- TTL-based lazy expiry (no background sweep)
- Bounded capacity with oldest-inserted eviction
"""

import hashlib
import json
import logging
from dataclasses import dataclass
from time import monotonic
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300
DEFAULT_CAPACITY = 100


@dataclass
class CacheEntry:
    """Cached value with its insertion time"""
    key: str
    value: Any
    inserted_at: float


def session_key_prefix(session_id: str) -> str:
    """Key prefix shared by every entry of one session.

    The session id is hashed to a fixed-width token so that one id being a
    prefix of another (``"a"`` and ``"a:b"``) cannot make their entries
    collide on invalidation.
    """
    token = hashlib.sha256(session_id.encode("utf-8")).hexdigest()[:16]
    return f"{token}:"


def make_cache_key(query: str, session_id: str, context: Optional[dict] = None) -> str:
    """Build a fingerprint for (query, session_id, context).

    Keys start with ``session_key_prefix(session_id)`` so a session's
    entries can be invalidated together.
    """
    payload = json.dumps(
        {"query": query, "session_id": session_id, "context": context or {}},
        sort_keys=True,
        ensure_ascii=False,
        default=str,
    )
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return f"{session_key_prefix(session_id)}{digest}"


class ResultCache:
    """In-memory, process-local cache for AnalysisResult objects

    Entries older than ``ttl`` seconds are treated as absent on read. When
    more than ``capacity`` entries are held, the oldest-inserted one is
    evicted (insertion order, not LRU).
    """

    def __init__(
        self,
        ttl: int = DEFAULT_TTL_SECONDS,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], float] = monotonic,
    ):
        """Initialize cache

        Args:
            ttl: Time-to-live in seconds (default: 5 minutes)
            capacity: Maximum number of entries held
            clock: Monotonic time source in seconds
        """
        self.ttl = ttl
        self.capacity = capacity
        self._clock = clock

        # dicts keep insertion order; the first key is the oldest entry
        self._entries: dict[str, CacheEntry] = {}

        # Stats
        self._hits = 0
        self._misses = 0
        self._evictions = 0

        logger.debug(f"ResultCache initialized (ttl={ttl}s, capacity={capacity})")

    def get(self, key: str) -> Optional[Any]:
        """Get a cached value if still within TTL

        Returns:
            Cached value or None on miss/expiry
        """
        entry = self._entries.get(key)

        if entry is None:
            self._misses += 1
            return None

        if self._clock() - entry.inserted_at > self.ttl:
            logger.debug(f"Cache entry expired: {key[:40]}")
            del self._entries[key]
            self._misses += 1
            return None

        self._hits += 1
        logger.debug(f"Cache hit: {key[:40]}")
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store a value, evicting the oldest entry when over capacity"""
        # Re-inserting moves the key to the newest position
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(key=key, value=value, inserted_at=self._clock())

        while len(self._entries) > self.capacity:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]
            self._evictions += 1
            logger.debug(f"Evicted oldest cache entry: {oldest_key[:40]}")

    def invalidate_prefix(self, prefix: str) -> int:
        """Drop every entry whose key starts with ``prefix``

        Returns:
            Number of entries removed
        """
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cache entries for prefix {prefix!r}")
        return len(stale)

    def clear(self) -> None:
        """Clear all entries and counters"""
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def stats(self) -> dict[str, Any]:
        """Get cache statistics

        Returns:
            Dictionary with cache stats for monitoring
        """
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "entries": len(self._entries),
            "capacity": self.capacity,
            "ttl_seconds": self.ttl,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate_percent": round(hit_rate, 1),
        }
