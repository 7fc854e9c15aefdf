"""Tests for the submission validation facade."""

import logging

from prayerwall.moderation.content_filter import ContentFilter
from prayerwall.validation.validator import (
    RETRY_ERROR,
    PrayerValidator,
    quick_validate_prayer_text,
    validate_prayer_text,
    validate_user_data,
    validate_user_id,
    validate_zip_code,
)

CLEAN_REQUEST = "Please pray for my sister's new job"


class _BrokenFilter(ContentFilter):
    def filter_content(self, text):
        raise RuntimeError("boom")

    def quick_validate(self, text):
        raise RuntimeError("boom")


def _validator(**kwargs) -> PrayerValidator:
    return PrayerValidator(ContentFilter(), **kwargs)


# --- Prayer text ---


def test_valid_prayer():
    result = _validator().validate_prayer_text(CLEAN_REQUEST)
    assert result.is_valid
    assert result.error is None
    assert result.suggestions == []
    assert not result.has_inappropriate_content


def test_missing_prayer():
    for text in (None, "", "   ", 12):
        result = _validator().validate_prayer_text(text)
        assert not result.is_valid
        assert result.error == "Please enter your prayer request"
        assert not result.has_inappropriate_content


def test_too_short():
    result = _validator(min_length=10).validate_prayer_text("  pray me  ")
    assert not result.is_valid
    assert result.error == "Prayer request must be at least 10 characters"
    assert not result.has_inappropriate_content


def test_too_long():
    result = _validator().validate_prayer_text("Please pray " + "for us " * 30)
    assert not result.is_valid
    assert result.error == "Prayer request must be no more than 125 characters"


def test_length_limit_is_inclusive():
    text = "Pray for my family " * 6  # 114 chars, 113 after trimming
    assert _validator(max_length=113).validate_prayer_text(text).is_valid


def test_inappropriate_content_flagged():
    result = _validator().validate_prayer_text("this is fucking terrible pray for me")
    assert not result.is_valid
    assert result.has_inappropriate_content
    assert len(result.suggestions) == 3


def test_full_check_fails_closed(caplog):
    validator = PrayerValidator(_BrokenFilter())
    with caplog.at_level(logging.ERROR):
        result = validator.validate_prayer_text(CLEAN_REQUEST)
    assert not result.is_valid
    assert result.error == RETRY_ERROR
    assert result.suggestions == []
    assert "Prayer text validation failed" in caplog.text


def test_quick_check_fails_open():
    verdict = PrayerValidator(_BrokenFilter()).quick_validate_prayer_text("anything")
    assert verdict.is_valid


def test_quick_check_delegates():
    validator = _validator()
    assert validator.quick_validate_prayer_text("").is_valid
    assert validator.quick_validate_prayer_text(None).is_valid
    assert not validator.quick_validate_prayer_text("  oh damn  ").is_valid


def test_module_helpers():
    assert validate_prayer_text(CLEAN_REQUEST).is_valid
    assert not validate_prayer_text(CLEAN_REQUEST, max_length=10).is_valid
    assert quick_validate_prayer_text(CLEAN_REQUEST).is_valid


# --- Zip code ---


def test_valid_zip_codes():
    assert validate_zip_code("12345")
    assert validate_zip_code(" 02134 ")
    assert validate_zip_code(90210)


def test_invalid_zip_codes():
    for value in (None, "", "1234", "123456", "abcde", "12 45", "12345-6789"):
        assert not validate_zip_code(value)


# --- User IDs ---


def test_legacy_user_id():
    assert validate_user_id("user_1700000000000_k3j4h5g6f_1234")
    assert validate_user_id("user_")


def test_generated_user_id():
    assert validate_user_id("BraveEagle42")
    assert validate_user_id("AbCd1")  # short, accepted by format alone
    assert not validate_user_id("abcd1")


def test_user_id_length_fallback():
    assert validate_user_id("abcdef")
    assert not validate_user_id("abcde")


def test_invalid_user_ids():
    for value in (None, "", "   ", "ab", "x" * 51, 12345678):
        assert not validate_user_id(value)


# --- User data ---


def test_valid_user_data():
    assert validate_user_data({"userId": "BraveEagle42", "zip": "12345", "isOnboarded": True})
    assert validate_user_data({"userId": "BraveEagle42", "zip": None, "isOnboarded": False})


def test_invalid_user_data():
    assert not validate_user_data(None)
    assert not validate_user_data({"zip": "12345", "isOnboarded": True})
    assert not validate_user_data({"userId": "BraveEagle42", "zip": "1234", "isOnboarded": True})
    assert not validate_user_data({"userId": "BraveEagle42", "zip": None, "isOnboarded": "yes"})


def test_unexpected_user_id_format_only_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert validate_user_data({"userId": "some-device-id", "zip": None, "isOnboarded": True})
    assert "unexpected format" in caplog.text


def test_zip_with_trailing_newline():
    # validate_zip_code trims its input; stored user records are not trimmed.
    assert validate_zip_code("12345\n")
    assert not validate_user_data({"userId": "BraveEagle42", "zip": "12345\n", "isOnboarded": True})


def test_generated_user_id_with_trailing_newline_is_not_known_format(caplog):
    with caplog.at_level(logging.WARNING):
        assert validate_user_data({"userId": "BraveEagle42\n", "zip": None, "isOnboarded": True})
    assert "unexpected format" in caplog.text
