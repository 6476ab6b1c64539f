"""
Domain models (Pydantic).

These types are the contract between the roster core, its collaborators and the
listing endpoint:
- roster entities (`Point`, `UserPosition`)
- what the rendering surface consumes (`CameraIntent`, `Marker`)
- a read-only view of the controller (`RosterState`)
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UserPosition(BaseModel):
    """Last known device coordinate, in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Point(BaseModel):
    """A named geographic marker owned by the roster."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


CameraIntentKind = Literal["recenter", "zoom_to", "frame_new_point"]


class CameraIntent(BaseModel):
    """A target viewport (center + angular span) the map should animate to."""

    model_config = ConfigDict(frozen=True)

    kind: CameraIntentKind
    lat: float
    lng: float
    lat_delta: float = Field(..., gt=0)
    lng_delta: float = Field(..., gt=0)


class Marker(BaseModel):
    """One marker for the rendering surface; selection events come back by `id`."""

    id: int
    lat: float
    lng: float
    label: str

    @classmethod
    def from_point(cls, point: Point) -> "Marker":
        return cls(id=point.id, lat=point.lat, lng=point.lng, label=point.name)


class RosterState(BaseModel):
    """Snapshot of the controller state (points newest first)."""

    status: Literal["loading", "ready"]
    points: list[Point] = Field(default_factory=list)
    search_query: str = ""
    proximity_enabled: bool = False
    user_position: UserPosition | None = None
