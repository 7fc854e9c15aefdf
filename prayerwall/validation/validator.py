"""Validator — form-level checks for prayer text, zip codes, and user IDs.

Length and format rules live here. Content judgments are delegated to the
ContentFilter. Unexpected errors fail closed on the full check (the request
is not submitted) and fail open on the quick check (typing is never blocked).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from prayerwall.moderation.content_filter import ContentFilter, content_filter
from prayerwall.moderation.models import ContentValidation, QuickVerdict
from prayerwall.moderation import rules

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 5
DEFAULT_MAX_LENGTH = 125

ZIP_CODE = re.compile(r"^\d{5}$")
LEGACY_USER_ID_PREFIX = "user_"
GENERATED_USER_ID = re.compile(r"^[A-Z][a-z]+[A-Z][a-z]+\d{1,4}$")
USER_ID_MIN_LENGTH = 3
USER_ID_MAX_LENGTH = 50
USER_ID_FALLBACK_LENGTH = 5

RETRY_ERROR = "Validation error - please try again"


class PrayerValidator:
    """Length checks in front of a ContentFilter."""

    def __init__(
        self,
        engine: ContentFilter | None = None,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self.engine = engine or content_filter
        self.min_length = min_length
        self.max_length = max_length

    def validate_prayer_text(self, text: Optional[str]) -> ContentValidation:
        """Validate a prayer request before submission."""
        try:
            return self._validate(text)
        except Exception:
            logger.exception("Prayer text validation failed")
            return ContentValidation(is_valid=False, error=RETRY_ERROR)

    def _validate(self, text: Optional[str]) -> ContentValidation:
        if not isinstance(text, str) or not text.strip():
            return ContentValidation(
                is_valid=False,
                error=rules.EMPTY_REASON,
                suggestions=list(rules.EMPTY_SUGGESTIONS),
            )

        trimmed = text.strip()
        if len(trimmed) < self.min_length:
            return ContentValidation(
                is_valid=False,
                error=f"Prayer request must be at least {self.min_length} characters",
                suggestions=["Add more details about your prayer request"],
            )
        if len(trimmed) > self.max_length:
            return ContentValidation(
                is_valid=False,
                error=f"Prayer request must be no more than {self.max_length} characters",
                suggestions=["Please shorten your prayer request"],
            )

        verdict = self.engine.filter_content(trimmed)
        return ContentValidation(
            is_valid=verdict.is_clean,
            error=verdict.reason,
            suggestions=list(verdict.suggestions),
            has_inappropriate_content=not verdict.is_clean,
        )

    def quick_validate_prayer_text(self, text: Optional[str]) -> QuickVerdict:
        """Feedback while typing. Never blocks input on an internal error."""
        try:
            if not isinstance(text, str) or not text.strip():
                return QuickVerdict.valid()
            return self.engine.quick_validate(text.strip())
        except Exception:
            logger.exception("Quick validation failed")
            return QuickVerdict.valid()


def validate_zip_code(zip_code: Any) -> bool:
    """True iff *zip_code* is exactly five decimal digits."""
    if zip_code is None or zip_code == "":
        return False
    return ZIP_CODE.fullmatch(str(zip_code).strip()) is not None


def is_known_user_id_format(user_id: str) -> bool:
    return user_id.startswith(LEGACY_USER_ID_PREFIX) or GENERATED_USER_ID.fullmatch(user_id) is not None


def validate_user_id(user_id: Any) -> bool:
    """Accept legacy ``user_`` IDs, generated AdjectiveNoun1234 IDs, or anything over five chars."""
    if not isinstance(user_id, str):
        return False
    trimmed = user_id.strip()
    if not trimmed:
        return False

    if not USER_ID_MIN_LENGTH <= len(trimmed) <= USER_ID_MAX_LENGTH:
        return False
    # The length fallback accepts almost anything; kept until product decides otherwise.
    return is_known_user_id_format(trimmed) or len(trimmed) > USER_ID_FALLBACK_LENGTH


def validate_user_data(data: Any) -> bool:
    """Check a stored user record: ``userId``, ``zip``, and ``isOnboarded``."""
    if not isinstance(data, dict):
        return False

    user_id = data.get("userId")
    if not isinstance(user_id, str) or not user_id:
        return False
    if not is_known_user_id_format(user_id):
        logger.warning("User ID has unexpected format: %s", user_id)

    zip_code = data.get("zip")
    if zip_code is not None and ZIP_CODE.fullmatch(str(zip_code)) is None:
        return False

    return isinstance(data.get("isOnboarded"), bool)


# ---------------------------------------------------------------------------
# Module-level helpers bound to the default filter
# ---------------------------------------------------------------------------

_default_validator = PrayerValidator()


def validate_prayer_text(
    text: Optional[str],
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> ContentValidation:
    return PrayerValidator(content_filter, min_length, max_length).validate_prayer_text(text)


def quick_validate_prayer_text(text: Optional[str]) -> QuickVerdict:
    return _default_validator.quick_validate_prayer_text(text)
