"""
Location catalog loader.

The listing endpoint serves a local JSON file (default: `data/locations.json`) holding
the full static collection. We validate it into `Point` models so ids and
coordinates have a consistent shape before they go out on the wire.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from maproster.core.env import resolve_project_path
from maproster.domain.models import Point


_POINTS_ADAPTER = TypeAdapter(list[Point])


def load_points(path: str | Path) -> list[Point]:
    """Load and validate a location catalog JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON, does not match `list[Point]`,
            or repeats an id.
    """
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    points = _POINTS_ADAPTER.validate_python(payload)

    ids = [p.id for p in points]
    if len(ids) != len(set(ids)):
        raise ValueError(f"duplicate point ids in {resolved}")
    return points
