"""Prayer-request moderation.

Provides the rule-based ContentFilter, its bounded verdict cache, and the
form helpers bound to a default shared filter instance.
"""

from prayerwall.moderation.cache import ValidationCache
from prayerwall.moderation.content_filter import (
    ContentFilter,
    clear_content_filter_cache,
    get_content_filter_stats,
    quick_validate_content,
    validate_prayer_content,
)
from prayerwall.moderation.models import (
    CacheStats,
    ContentValidation,
    FilterOptions,
    FilterVerdict,
    QuickVerdict,
    Strictness,
)

__all__ = [
    "CacheStats",
    "ContentFilter",
    "ContentValidation",
    "FilterOptions",
    "FilterVerdict",
    "QuickVerdict",
    "Strictness",
    "ValidationCache",
    "clear_content_filter_cache",
    "get_content_filter_stats",
    "quick_validate_content",
    "validate_prayer_content",
]
