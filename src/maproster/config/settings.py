# src/maproster/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/maproster/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `MAPROSTER_CONFIG_PATH`
- a small whitelist of environment variables (`MAPROSTER_LOG_LEVEL`, `MAPROSTER_SOURCE_KIND`, ...)

Design rule:
- Tuning knobs (radius, camera spans, default names) live in YAML, not in roster logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal
from maproster.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `maproster.config`."""
    text = resources.files("maproster.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "MapRoster"
    http_timeout_seconds: float = 15
    log_level: str = "INFO"


class RosterSettings(BaseModel):
    proximity_radius_m: float = Field(500, gt=0)
    default_name_template: str = "Novo Local {n}"
    # 0 places new points exactly at the user position.
    add_jitter_deg: float = Field(0.001, ge=0)


class CameraSettings(BaseModel):
    recenter_span_deg: float = Field(0.02, gt=0)
    zoom_span_deg: float = Field(0.01, gt=0)
    new_point_span_deg: float = Field(0.01, gt=0)


class SourceSettings(BaseModel):
    kind: Literal["remote", "synthetic"] = "synthetic"
    base_url: str = "http://localhost:3001"
    synthetic_offset_deg: float = 0.001


class ApiSettings(BaseModel):
    locations_path: str = "data/locations.json"


class DialogSettings(BaseModel):
    edit_title: str = "Editar Nome"
    edit_message: str = "Digite o novo nome:"
    delete_title: str = "Remover local"
    delete_message: str = "Tem certeza que deseja remover este local?"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    roster: RosterSettings = Field(default_factory=RosterSettings)
    camera: CameraSettings = Field(default_factory=CameraSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    dialogs: DialogSettings = Field(default_factory=DialogSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("MAPROSTER_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    source_kind = os.getenv("MAPROSTER_SOURCE_KIND")
    if source_kind:
        data.setdefault("source", {})["kind"] = source_kind.strip().lower()

    listing_url = os.getenv("MAPROSTER_LISTING_URL")
    if listing_url:
        data.setdefault("source", {})["base_url"] = listing_url

    locations_path = os.getenv("MAPROSTER_LOCATIONS_PATH")
    if locations_path:
        data.setdefault("api", {})["locations_path"] = locations_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("MAPROSTER_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
