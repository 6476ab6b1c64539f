"""
Visible-set computation.

The list and the map both render `apply_filter(...)` of the current roster, so this
must stay a pure function of its arguments.
"""

from __future__ import annotations

from typing import Sequence

from maproster.core.geo import haversine_m
from maproster.domain.models import Point, UserPosition

DEFAULT_PROXIMITY_RADIUS_M = 500.0


def matches_query(point: Point, query: str) -> bool:
    """Case-insensitive substring match on the point name (empty query matches all)."""
    if not query:
        return True
    return query.lower() in point.name.lower()


def apply_filter(
    points: Sequence[Point],
    query: str,
    proximity_enabled: bool,
    user_position: UserPosition | None,
    *,
    radius_m: float = DEFAULT_PROXIMITY_RADIUS_M,
) -> list[Point]:
    """Return the points passing the name and (when active) proximity predicates.

    Notes:
    - Proximity is only restrictive when it is enabled *and* a position is known;
      otherwise the result is the name match alone.
    - Input order is preserved; results are not sorted by distance.
    """
    use_proximity = proximity_enabled and user_position is not None
    out: list[Point] = []
    for p in points:
        if not matches_query(p, query):
            continue
        if use_proximity and haversine_m(p, user_position) > radius_m:
            continue
        out.append(p)
    return out
