"""Data models for the content moderation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Strictness(Enum):
    """How aggressively the filter rejects borderline text.

    Only MODERATE has tuned behaviour. LENIENT and STRICT are accepted so
    configuration files can name them, but they currently behave the same.
    """

    LENIENT = "lenient"
    MODERATE = "moderate"
    STRICT = "strict"


@dataclass
class FilterOptions:
    """Construction options for a ContentFilter."""

    strictness: Strictness = Strictness.MODERATE
    allow_sensitive_topics: bool = True
    cache_enabled: bool = True


@dataclass(frozen=True)
class FilterVerdict:
    """Result of a full content check.

    Frozen because cached verdicts are shared between callers.
    """

    is_clean: bool
    reason: Optional[str] = None
    suggestions: tuple[str, ...] = ()
    violation_type: str = ""  # "empty" | "profanity" | "inappropriate" | "spam" | "link" | "too_short" | "unclear" | ""

    @classmethod
    def clean(cls) -> FilterVerdict:
        return cls(is_clean=True)

    @classmethod
    def reject(cls, reason: str, suggestions: tuple[str, ...], violation_type: str) -> FilterVerdict:
        return cls(
            is_clean=False,
            reason=reason,
            suggestions=tuple(suggestions),
            violation_type=violation_type,
        )


@dataclass(frozen=True)
class QuickVerdict:
    """Result of the abbreviated check used for live typing feedback."""

    is_valid: bool
    message: Optional[str] = None

    @classmethod
    def valid(cls) -> QuickVerdict:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> QuickVerdict:
        return cls(is_valid=False, message=message)


@dataclass
class ContentValidation:
    """Form-level validation result handed to submission screens."""

    is_valid: bool
    error: Optional[str] = None
    suggestions: list[str] = field(default_factory=list)
    has_inappropriate_content: bool = False


@dataclass
class CacheStats:
    """Diagnostics snapshot of a filter's validation cache."""

    size: int
    limit: int
    enabled: bool
