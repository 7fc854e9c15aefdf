"""FastAPI application for the PrayerWall moderation service.

Provides REST API endpoints wrapping the prayerwall package so the
submission backend can re-validate prayer requests with the same rules
the app runs on the device.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the prayerwall package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prayerwall import __version__
from web.backend.app.routers import moderation

app = FastAPI(
    title="PrayerWall Moderation API",
    description=(
        "REST API for prayer request moderation. "
        "Provides full and quick content checks, submission validation, "
        "format checks, and cache diagnostics."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(moderation.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "PrayerWall Moderation API",
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
