from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from maproster.catalog.loader import load_points
from maproster.core.env import resolve_project_path
from maproster.core.geo import GeoPoint, haversine_m
from maproster.domain.models import Point


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _norm_name(s: str) -> str:
    return " ".join(str(s or "").strip().lower().split())


def import_rows_from_csv(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        return [row for row in csv.DictReader(f) if isinstance(row, dict)]


def import_rows_from_json(path: Path) -> list[dict[str, Any]]:
    payload = _read_json(path)
    if isinstance(payload, list):
        return [r for r in payload if isinstance(r, dict)]
    raise ValueError("Unsupported JSON shape: expected an array of objects.")


def merge_rows(
    existing: list[Point],
    rows: list[dict[str, Any]],
    *,
    overwrite: bool = False,
    dedupe_radius_m: float = 40.0,
    fields: dict[str, str] | None = None,
) -> tuple[list[Point], dict[str, int]]:
    """Merge raw rows into `existing`; returns the new list and counters.

    Rows without an id get the next free integer id. A row whose normalized name
    matches an existing point within `dedupe_radius_m` is treated as that point.
    """
    f = {"id": "id", "name": "name", "lat": "lat", "lng": "lng", **(fields or {})}
    by_id: dict[int, Point] = {p.id: p for p in existing}
    next_id = max(by_id, default=0) + 1
    counts = {"added": 0, "updated": 0, "skipped": 0, "bad": 0}

    for r in rows:
        raw_id = str(r.get(f["id"]) or "").strip()
        try:
            candidate = Point(
                id=int(raw_id) if raw_id else next_id,
                name=str(r.get(f["name"]) or "").strip(),
                lat=float(r.get(f["lat"])),
                lng=float(r.get(f["lng"])),
            )
        except (TypeError, ValueError, ValidationError):
            counts["bad"] += 1
            continue
        if not candidate.name:
            counts["bad"] += 1
            continue

        if dedupe_radius_m > 0:
            here = GeoPoint(lat=candidate.lat, lng=candidate.lng)
            for cur in by_id.values():
                if _norm_name(cur.name) == _norm_name(candidate.name) and haversine_m(cur, here) <= dedupe_radius_m:
                    candidate = candidate.model_copy(update={"id": cur.id})
                    break

        if candidate.id in by_id:
            if overwrite:
                by_id[candidate.id] = candidate
                counts["updated"] += 1
            else:
                counts["skipped"] += 1
            continue

        by_id[candidate.id] = candidate
        next_id = max(next_id, candidate.id + 1)
        counts["added"] += 1

    return sorted(by_id.values(), key=lambda p: p.id), counts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Import/merge locations from a local CSV/JSON file (offline).")
    p.add_argument("--catalog", type=str, default="data/locations.json")
    p.add_argument("--in-csv", type=str, default=None)
    p.add_argument("--in-json", type=str, default=None)
    p.add_argument("--merge", choices=["keep-existing", "overwrite"], default="keep-existing")
    p.add_argument("--id-field", type=str, default="id")
    p.add_argument("--name-field", type=str, default="name")
    p.add_argument("--lat-field", type=str, default="lat")
    p.add_argument("--lng-field", type=str, default="lng")
    p.add_argument(
        "--dedupe-radius-m",
        type=float,
        default=40.0,
        help="Treat incoming rows as duplicates if within this radius and name matches (0 disables).",
    )
    args = p.parse_args(argv)

    if bool(args.in_csv) == bool(args.in_json):
        raise SystemExit("Provide exactly one of --in-csv or --in-json.")

    catalog_path = resolve_project_path(args.catalog)
    existing = load_points(catalog_path) if catalog_path.exists() else []
    rows = (
        import_rows_from_csv(resolve_project_path(args.in_csv))
        if args.in_csv
        else import_rows_from_json(resolve_project_path(args.in_json))
    )

    merged, counts = merge_rows(
        existing,
        rows,
        overwrite=args.merge == "overwrite",
        dedupe_radius_m=float(args.dedupe_radius_m),
        fields={"id": args.id_field, "name": args.name_field, "lat": args.lat_field, "lng": args.lng_field},
    )
    _write_json(catalog_path, [pt.model_dump(mode="json") for pt in merged])
    print(
        f"catalog: {catalog_path} total={len(merged)} added={counts['added']} "
        f"updated={counts['updated']} skipped={counts['skipped']} bad={counts['bad']}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
