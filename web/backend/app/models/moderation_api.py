"""Pydantic models for moderation API request/response serialization.

These models mirror the prayerwall dataclasses and provide JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ContentCheckRequest(BaseModel):
    """Body for the full and quick content checks."""

    text: Optional[str] = None


class PrayerValidationRequest(BaseModel):
    """Body for the submission validation endpoint."""

    text: Optional[str] = None
    min_length: Optional[int] = Field(default=None, ge=1)
    max_length: Optional[int] = Field(default=None, ge=1)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class FilterVerdictResponse(BaseModel):
    """Mirrors prayerwall.moderation.models.FilterVerdict."""

    is_clean: bool
    reason: Optional[str] = None
    suggestions: list[str] = Field(default_factory=list)
    violation_type: str = ""


class QuickVerdictResponse(BaseModel):
    """Mirrors prayerwall.moderation.models.QuickVerdict."""

    is_valid: bool
    message: Optional[str] = None


class PrayerValidationResponse(BaseModel):
    """Mirrors prayerwall.moderation.models.ContentValidation."""

    is_valid: bool
    error: Optional[str] = None
    suggestions: list[str] = Field(default_factory=list)
    has_inappropriate_content: bool = False


class FormatCheckResponse(BaseModel):
    """Result of a zip code or user ID format check."""

    value: str
    valid: bool


class CacheStatsResponse(BaseModel):
    """Mirrors prayerwall.moderation.models.CacheStats."""

    size: int
    limit: int
    enabled: bool
