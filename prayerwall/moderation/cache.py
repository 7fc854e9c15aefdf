"""Bounded, insertion-ordered cache of moderation verdicts."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Optional

logger = logging.getLogger(__name__)

CACHE_SIZE_LIMIT = 500
CACHE_CLEANUP_COUNT = 400
KEY_PREFIX_LENGTH = 100


def make_key(text: str, mode: str = "full") -> str:
    """Build a cache key from the first 100 characters plus the total length."""
    return f"{mode}_{text[:KEY_PREFIX_LENGTH]}_{len(text)}"


class ValidationCache:
    """Verdict cache owned by a single ContentFilter.

    When an insert pushes the size past ``limit`` the oldest ``cleanup``
    entries are dropped in one sweep. Lookups do not refresh an entry's
    position, so eviction is strictly by insertion order.

    Keys only cover a prefix of the text, so each entry also keeps the full
    source text. A lookup whose source differs from the stored one is a miss.
    """

    def __init__(self, limit: int = CACHE_SIZE_LIMIT, cleanup: int = CACHE_CLEANUP_COUNT) -> None:
        if limit < 1:
            raise ValueError("Cache limit must be at least 1")
        self._limit = limit
        self._cleanup = max(1, min(cleanup, limit))
        self._entries: OrderedDict[str, Any] = OrderedDict()

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str, source: Optional[str] = None) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_source, value = entry
        if source is not None and stored_source != source:
            return None
        return value

    def put(self, key: str, value: Any, source: Optional[str] = None) -> None:
        self._entries[key] = (source, value)
        if len(self._entries) > self._limit:
            self._evict()

    def clear(self) -> None:
        self._entries.clear()

    def _evict(self) -> None:
        for _ in range(self._cleanup):
            self._entries.popitem(last=False)
        logger.debug("Evicted %d cache entries, %d remain", self._cleanup, len(self._entries))
