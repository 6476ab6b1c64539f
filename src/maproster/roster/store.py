"""
In-memory location store.

Owns the canonical point collection (newest first). Ids come from an injected
factory and are never handed out twice in a session, even after the point that
held them is removed.
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Iterable

from maproster.core.geo import normalize_lat_lng
from maproster.domain.errors import PointNotFoundError
from maproster.domain.models import Point

logger = logging.getLogger(__name__)

IdFactory = Callable[[], int]


def counter_id_factory(start: int = 1) -> IdFactory:
    """Return a monotonic integer id factory."""
    counter = itertools.count(start)
    return lambda: next(counter)


class LocationStore:
    def __init__(self, points: Iterable[Point] = (), *, id_factory: IdFactory | None = None):
        self._id_factory = id_factory or counter_id_factory()
        self._points: list[Point] = []
        self._used_ids: set[int] = set()
        if points:
            self.load(points)

    def __len__(self) -> int:
        return len(self._points)

    def load(self, points: Iterable[Point]) -> None:
        """Replace the collection with an initial batch (kept in the given order)."""
        batch = list(points)
        seen: set[int] = set()
        for p in batch:
            if p.id in seen:
                raise ValueError(f"duplicate point id in initial batch: {p.id}")
            seen.add(p.id)
        self._points = batch
        self._used_ids |= seen
        logger.debug("Loaded %d points", len(batch))

    def _next_id(self) -> int:
        while True:
            candidate = int(self._id_factory())
            if candidate not in self._used_ids:
                return candidate

    def _index_of(self, point_id: int) -> int:
        for i, p in enumerate(self._points):
            if p.id == point_id:
                return i
        raise PointNotFoundError(point_id)

    def get(self, point_id: int) -> Point:
        return self._points[self._index_of(point_id)]

    def add(self, name: str, lat: float, lng: float) -> Point:
        """Create a point with a fresh id and put it first.

        Coordinates past a pole or the antimeridian are folded back onto the map.
        """
        lat, lng = normalize_lat_lng(lat, lng)
        point = Point(id=self._next_id(), name=name, lat=lat, lng=lng)
        self._used_ids.add(point.id)
        self._points.insert(0, point)
        logger.info("Added point id=%s name=%r", point.id, point.name)
        return point

    def rename(self, point_id: int, new_name: str | None) -> None:
        """Rename a point; an empty name is accepted as a no-op (cancel semantics).

        Raises:
            PointNotFoundError: If `new_name` is non-empty and no point has `point_id`.
        """
        if not new_name or not new_name.strip():
            return
        i = self._index_of(point_id)
        self._points[i] = self._points[i].model_copy(update={"name": new_name})
        logger.info("Renamed point id=%s to %r", point_id, new_name)

    def remove(self, point_id: int) -> None:
        """Delete a point.

        Raises:
            PointNotFoundError: If no point has `point_id` (collection unchanged).
        """
        i = self._index_of(point_id)
        del self._points[i]
        logger.info("Removed point id=%s", point_id)

    def list(self) -> list[Point]:
        return list(self._points)
