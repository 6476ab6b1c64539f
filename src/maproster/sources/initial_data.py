"""
Initial roster data sources.

The roster is seeded once, either from the listing endpoint (`RemoteSource`) or
from points synthesized around the user (`SyntheticSource`). Which one is used is
decided at composition time (`maproster.roster.factory`).
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from maproster.core.geo import normalize_lat_lng
from maproster.core.http import get_json
from maproster.domain.errors import ListingUnavailableError
from maproster.domain.models import Point, UserPosition

logger = logging.getLogger(__name__)

_POINTS_ADAPTER = TypeAdapter(list[Point])


class InitialDataSource(Protocol):
    async def fetch(self, user_position: UserPosition) -> list[Point]: ...


class RemoteSource:
    """Fetch the full static collection from `GET {base_url}/locations`."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 15,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = base_url.rstrip("/") + "/locations"
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch(self, user_position: UserPosition) -> list[Point]:
        logger.info("Fetching locations from %s", self._url)
        try:
            payload = await get_json(self._url, timeout_seconds=self._timeout_seconds, transport=self._transport)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise ListingUnavailableError(f"listing fetch failed: {e}") from e
        try:
            return _POINTS_ADAPTER.validate_python(payload)
        except ValidationError as e:
            raise ListingUnavailableError(f"listing payload is invalid: {e.error_count()} error(s)") from e


class SyntheticSource:
    """Two demo points placed diagonally around the user position."""

    def __init__(self, offset_deg: float = 0.001):
        self._offset = float(offset_deg)

    def _point(self, point_id: int, name: str, lat: float, lng: float) -> Point:
        lat, lng = normalize_lat_lng(lat, lng)
        return Point(id=point_id, name=name, lat=lat, lng=lng)

    async def fetch(self, user_position: UserPosition) -> list[Point]:
        d = self._offset
        return [
            self._point(1, "Ponto A", user_position.lat + d, user_position.lng + d),
            self._point(2, "Ponto B", user_position.lat - d, user_position.lng - d),
        ]
