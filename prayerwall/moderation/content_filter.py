"""Rule-based content filter for prayer requests.

Runs a fixed pipeline of checks (profanity, disallowed patterns, spam,
quality) and stops at the first one that fails.  Verdicts are cached per
filter instance, keyed on a prefix of the trimmed text plus its length.
A hit only counts when the stored text matches the trimmed text exactly.

A lighter ``quick_validate`` runs only the cheapest subset of the rules and
is meant for feedback while the user is still typing.  It can miss things
the full check catches, so the full check must still run before submission.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from prayerwall.moderation import rules
from prayerwall.moderation.cache import ValidationCache, make_key
from prayerwall.moderation.models import (
    CacheStats,
    ContentValidation,
    FilterOptions,
    FilterVerdict,
    QuickVerdict,
    Strictness,
)

logger = logging.getLogger(__name__)

_PASS = FilterVerdict.clean()


class ContentFilter:
    """Moderation engine with its own verdict cache."""

    def __init__(
        self,
        options: FilterOptions | None = None,
        cache: ValidationCache | None = None,
        *,
        strictness: Strictness | str | None = None,
        allow_sensitive_topics: bool | None = None,
        cache_enabled: bool | None = None,
    ) -> None:
        opts = replace(options) if options else FilterOptions()
        if strictness is not None:
            opts.strictness = Strictness(strictness)
        if allow_sensitive_topics is not None:
            opts.allow_sensitive_topics = allow_sensitive_topics
        if cache_enabled is not None:
            opts.cache_enabled = cache_enabled
        self.options = opts
        self._cache = cache if cache is not None else ValidationCache()

    @property
    def strictness(self) -> Strictness:
        return self.options.strictness

    @property
    def cache_enabled(self) -> bool:
        return self.options.cache_enabled

    # -- full check ----------------------------------------------------------

    def filter_content(self, text: Optional[str]) -> FilterVerdict:
        """Run every check against *text* and return the first failure."""
        if not isinstance(text, str) or not text.strip():
            return FilterVerdict.reject(rules.EMPTY_REASON, rules.EMPTY_SUGGESTIONS, "empty")

        clean_text = text.strip()
        key = make_key(clean_text, "full")
        if self.cache_enabled:
            cached = self._cache.get(key, clean_text)
            if cached is not None:
                logger.debug("Full check cache hit")
                return cached

        verdict = self._run_pipeline(clean_text)
        if not verdict.is_clean:
            logger.info("Prayer request rejected: %s", verdict.violation_type)

        if self.cache_enabled:
            self._cache.put(key, verdict, clean_text)
        return verdict

    def _run_pipeline(self, text: str) -> FilterVerdict:
        for check in (
            self.check_profanity,
            self.check_inappropriate_content,
            self.check_spam_patterns,
            self.check_content_quality,
        ):
            verdict = check(text)
            if not verdict.is_clean:
                return verdict
        return _PASS

    # -- individual checks -----------------------------------------------------

    @staticmethod
    def _has_profanity(words: list[str]) -> bool:
        return any(rules.normalize_token(w) in rules.PROFANITY_TERMS for w in words)

    def check_profanity(self, text: str) -> FilterVerdict:
        if self._has_profanity(text.lower().split()):
            return FilterVerdict.reject(
                rules.PROFANITY_REASON, rules.PROFANITY_SUGGESTIONS, "profanity"
            )
        return _PASS

    def _discusses_sensitive_topic(self, lower_text: str) -> bool:
        if not self.options.allow_sensitive_topics:
            return False
        return any(topic in lower_text for topic in rules.ALLOWED_SENSITIVE_TOPICS)

    def check_inappropriate_content(self, text: str) -> FilterVerdict:
        """Reject disallowed patterns unless the text discusses an allowed topic.

        One allowed topic anywhere in the text suppresses every pattern match,
        not only the one that fired.
        """
        lower_text = text.lower()
        for rule in rules.DISALLOWED_PATTERNS:
            if not rule.search(text):
                continue
            if self._discusses_sensitive_topic(lower_text):
                logger.debug("Suppressed %s match for sensitive topic", rule.category)
                continue
            return FilterVerdict.reject(
                rules.INAPPROPRIATE_REASON, rules.INAPPROPRIATE_SUGGESTIONS, "inappropriate"
            )
        return _PASS

    def check_spam_patterns(self, text: str) -> FilterVerdict:
        for pattern in rules.SPAM_PATTERNS:
            if pattern.search(text):
                return FilterVerdict.reject(rules.SPAM_REASON, rules.SPAM_SUGGESTIONS, "spam")

        if rules.URL_PATTERN.search(text):
            return FilterVerdict.reject(rules.LINK_REASON, rules.LINK_SUGGESTIONS, "link")
        return _PASS

    def check_content_quality(self, text: str) -> FilterVerdict:
        trimmed = text.strip()
        if len(trimmed) < rules.MIN_MEANINGFUL_LENGTH:
            return FilterVerdict.reject(
                rules.TOO_SHORT_REASON, rules.TOO_SHORT_SUGGESTIONS, "too_short"
            )

        # Keyboard mashing and symbol soup
        letters = len(rules.LETTER.findall(trimmed))
        if len(trimmed) > rules.GIBBERISH_MIN_LENGTH and letters / len(trimmed) < rules.MIN_LETTER_RATIO:
            return FilterVerdict.reject(rules.UNCLEAR_REASON, rules.UNCLEAR_SUGGESTIONS, "unclear")
        return _PASS

    # -- quick check ---------------------------------------------------------

    def quick_validate(self, text: Optional[str]) -> QuickVerdict:
        """Cheap check for live typing feedback.

        Looks at the first ten words for profanity and the first three
        disallowed patterns, without sensitive-topic suppression.
        """
        if not isinstance(text, str) or not text.strip():
            return QuickVerdict.valid()

        trimmed = text.strip()
        key = make_key(trimmed, "quick")
        if self.cache_enabled:
            cached = self._cache.get(key, trimmed)
            if cached is not None:
                return cached

        words = trimmed.lower().split()[:10]
        if self._has_profanity(words):
            verdict = QuickVerdict.invalid(rules.QUICK_PROFANITY_MESSAGE)
        elif any(r.search(trimmed) for r in rules.DISALLOWED_PATTERNS[: rules.QUICK_PATTERN_COUNT]):
            verdict = QuickVerdict.invalid(rules.QUICK_INAPPROPRIATE_MESSAGE)
        else:
            verdict = QuickVerdict.valid()

        if self.cache_enabled:
            self._cache.put(key, verdict, trimmed)
        return verdict

    # -- cache management ----------------------------------------------------

    def clear_cache(self) -> None:
        self._cache.clear()

    def get_cache_stats(self) -> CacheStats:
        return CacheStats(
            size=len(self._cache),
            limit=self._cache.limit,
            enabled=self.cache_enabled,
        )


# ---------------------------------------------------------------------------
# Default instance and form helpers
# ---------------------------------------------------------------------------

content_filter = ContentFilter(FilterOptions(
    strictness=Strictness.MODERATE,
    allow_sensitive_topics=True,
    cache_enabled=True,
))


def validate_prayer_content(
    text: Optional[str], engine: ContentFilter | None = None
) -> ContentValidation:
    """Translate a full-check verdict into a form validation result."""
    engine = engine or content_filter
    if not isinstance(text, str) or not text:
        return ContentValidation(
            is_valid=False,
            error=rules.EMPTY_REASON,
            suggestions=list(rules.EMPTY_SUGGESTIONS),
            has_inappropriate_content=False,
        )

    verdict = engine.filter_content(text)
    return ContentValidation(
        is_valid=verdict.is_clean,
        error=verdict.reason,
        suggestions=list(verdict.suggestions),
        has_inappropriate_content=not verdict.is_clean,
    )


def quick_validate_content(
    text: Optional[str], engine: ContentFilter | None = None
) -> QuickVerdict:
    if not isinstance(text, str) or not text:
        return QuickVerdict.valid()
    engine = engine or content_filter
    return engine.quick_validate(text)


def clear_content_filter_cache(engine: ContentFilter | None = None) -> None:
    """Drop every cached verdict, e.g. when the app is backgrounded."""
    (engine or content_filter).clear_cache()


def get_content_filter_stats(engine: ContentFilter | None = None) -> CacheStats:
    return (engine or content_filter).get_cache_stats()
