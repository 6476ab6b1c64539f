import json

from starlette.testclient import TestClient

from maproster.api.app import app
from maproster.config.settings import get_settings


def _use_catalog(monkeypatch, path):
    # Point the cached settings at a temp catalog so API tests never touch repo data.
    settings = get_settings()
    api = settings.api.model_copy(update={"locations_path": str(path)})
    patched = settings.model_copy(update={"api": api})
    monkeypatch.setattr("maproster.api.routes.get_settings", lambda: patched)


def test_get_locations_returns_full_collection(monkeypatch, tmp_path):
    catalog = tmp_path / "locations.json"
    rows = [
        {"id": 1, "name": "Ponto A", "lat": -23.55, "lng": -46.63},
        {"id": 2, "name": "Ponto B", "lat": -23.56, "lng": -46.64},
    ]
    catalog.write_text(json.dumps(rows), encoding="utf-8")
    _use_catalog(monkeypatch, catalog)

    with TestClient(app) as c:
        resp = c.get("/locations")
        health = c.get("/healthz")

    assert resp.status_code == 200
    assert resp.json() == rows
    assert health.json() == {"ok": True, "count": 2}


def test_get_locations_is_cors_permissive(monkeypatch, tmp_path):
    catalog = tmp_path / "locations.json"
    catalog.write_text("[]", encoding="utf-8")
    _use_catalog(monkeypatch, catalog)

    with TestClient(app) as c:
        resp = c.get("/locations", headers={"Origin": "http://192.168.0.10:19006"})

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_missing_catalog_is_a_500_with_code(monkeypatch, tmp_path):
    _use_catalog(monkeypatch, tmp_path / "missing.json")

    with TestClient(app) as c:
        resp = c.get("/locations")

    assert resp.status_code == 500
    assert resp.json()["detail"]["code"] == "CATALOG_UNAVAILABLE"


def test_catalog_with_duplicate_ids_is_rejected(monkeypatch, tmp_path):
    catalog = tmp_path / "locations.json"
    row = {"id": 1, "name": "Ponto A", "lat": 0, "lng": 0}
    catalog.write_text(json.dumps([row, row]), encoding="utf-8")
    _use_catalog(monkeypatch, catalog)

    with TestClient(app) as c:
        resp = c.get("/locations")

    assert resp.status_code == 500
