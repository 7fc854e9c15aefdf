"""Moderation router -- server-side re-validation of prayer requests.

Prefix: ``/api/moderation``

Content rejections are ordinary 200 responses carrying a verdict. Only
malformed requests produce HTTP errors.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from prayerwall.config import build_validator, load_settings
from prayerwall.validation.validator import PrayerValidator, validate_user_id, validate_zip_code
from web.backend.app.models.moderation_api import (
    CacheStatsResponse,
    ContentCheckRequest,
    FilterVerdictResponse,
    FormatCheckResponse,
    PrayerValidationRequest,
    PrayerValidationResponse,
    QuickVerdictResponse,
)

router = APIRouter(prefix="/api/moderation", tags=["moderation"])

# ---------------------------------------------------------------------------
# Shared validator (one filter and cache for the running process)
# ---------------------------------------------------------------------------
_validator = build_validator(load_settings())


def get_validator() -> PrayerValidator:
    return _validator


# ---------------------------------------------------------------------------
# Content checks
# ---------------------------------------------------------------------------


@router.post("/check", response_model=FilterVerdictResponse, summary="Full content check")
async def check_content(request: ContentCheckRequest):
    """Run the full moderation pipeline on the submitted text."""
    verdict = get_validator().engine.filter_content(request.text)
    return FilterVerdictResponse(
        is_clean=verdict.is_clean,
        reason=verdict.reason,
        suggestions=list(verdict.suggestions),
        violation_type=verdict.violation_type,
    )


@router.post("/quick", response_model=QuickVerdictResponse, summary="Quick typing check")
async def quick_check(request: ContentCheckRequest):
    """Run the abbreviated check used for live typing feedback."""
    validator = get_validator()
    return QuickVerdictResponse(**asdict(validator.quick_validate_prayer_text(request.text)))


@router.post("/validate", response_model=PrayerValidationResponse, summary="Validate a submission")
async def validate_submission(request: PrayerValidationRequest):
    """Length limits plus the full content check, as done before storing a request."""
    base = get_validator()
    min_length = request.min_length or base.min_length
    max_length = request.max_length or base.max_length
    if min_length > max_length:
        raise HTTPException(
            status_code=400,
            detail=f"min_length ({min_length}) exceeds max_length ({max_length})",
        )

    validator = PrayerValidator(base.engine, min_length=min_length, max_length=max_length)
    return PrayerValidationResponse(**asdict(validator.validate_prayer_text(request.text)))


# ---------------------------------------------------------------------------
# Format checks
# ---------------------------------------------------------------------------


@router.get("/zip/{zip_code}", response_model=FormatCheckResponse)
async def check_zip_code(zip_code: str):
    return FormatCheckResponse(value=zip_code, valid=validate_zip_code(zip_code))


@router.get("/user-id/{user_id}", response_model=FormatCheckResponse)
async def check_user_id(user_id: str):
    return FormatCheckResponse(value=user_id, valid=validate_user_id(user_id))


# ---------------------------------------------------------------------------
# Cache diagnostics
# ---------------------------------------------------------------------------


@router.get("/cache", response_model=CacheStatsResponse)
async def cache_stats():
    """Return validation cache statistics."""
    return CacheStatsResponse(**asdict(get_validator().engine.get_cache_stats()))


@router.delete("/cache", response_model=CacheStatsResponse)
async def clear_cache():
    """Drop every cached verdict and return the (now empty) stats."""
    engine = get_validator().engine
    engine.clear_cache()
    return CacheStatsResponse(**asdict(engine.get_cache_stats()))
