from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt
from typing import Protocol

"""
Geospatial helpers.

Distance is all the roster needs, so we keep a haversine helper here instead of
pulling in a GIS dependency.
"""

EARTH_RADIUS_M = 6_371_000


class HasLatLng(Protocol):
    lat: float
    lng: float


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


def haversine_m(a: HasLatLng, b: HasLatLng) -> float:
    """Compute great-circle distance in meters between two points."""
    lat1 = radians(a.lat)
    lng1 = radians(a.lng)
    lat2 = radians(b.lat)
    lng2 = radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_M * asin(sqrt(min(1.0, h)))


def normalize_lat_lng(lat: float, lng: float) -> tuple[float, float]:
    """Clamp latitude to [-90, 90] and wrap longitude into [-180, 180]."""
    lat = max(-90.0, min(90.0, float(lat)))
    lng = float(lng)
    if not -180.0 <= lng <= 180.0:
        lng = (lng + 180.0) % 360.0 - 180.0
    return lat, lng
