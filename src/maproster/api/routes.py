"""
API routes.

Endpoints:
- GET `/locations`: the full static collection (no paging, no auth).
- GET `/healthz`: liveness plus the catalog size.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from maproster.catalog.loader import load_points
from maproster.config.settings import get_settings
from maproster.domain.models import Point

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_catalog() -> list[Point]:
    settings = get_settings()
    try:
        return load_points(settings.api.locations_path)
    except (OSError, ValueError) as e:
        logger.error("Failed to load location catalog %s: %s", settings.api.locations_path, e)
        raise HTTPException(
            status_code=500,
            detail={"code": "CATALOG_UNAVAILABLE", "message": str(e)},
        ) from e


@router.get("/locations", response_model=list[Point])
def get_locations() -> list[Point]:
    """Return every location in the catalog."""
    return _load_catalog()


@router.get("/healthz")
def healthz() -> dict:
    return {"ok": True, "count": len(_load_catalog())}
