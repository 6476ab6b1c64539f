"""
Composition root for the roster.

Picks the initial data source from settings and wires store, camera and controller
together. Tests and the CLI inject id/jitter functions here for deterministic runs.
"""

from __future__ import annotations

from maproster.config.settings import Settings
from maproster.roster.camera import MapCameraController
from maproster.roster.controller import Jitter, RosterController
from maproster.roster.store import IdFactory, LocationStore
from maproster.sources.dialogs import Dialogs
from maproster.sources.initial_data import InitialDataSource, RemoteSource, SyntheticSource
from maproster.sources.position import PositionSource


def build_initial_source(settings: Settings) -> InitialDataSource:
    """Return the configured initial data source (`remote` or `synthetic`)."""
    if settings.source.kind == "remote":
        return RemoteSource(settings.source.base_url, timeout_seconds=settings.app.http_timeout_seconds)
    return SyntheticSource(offset_deg=settings.source.synthetic_offset_deg)


def build_controller(
    settings: Settings,
    *,
    position_source: PositionSource,
    dialogs: Dialogs,
    initial_source: InitialDataSource | None = None,
    id_factory: IdFactory | None = None,
    jitter: Jitter | None = None,
    mounted: bool = True,
) -> RosterController:
    return RosterController(
        position_source=position_source,
        initial_source=initial_source or build_initial_source(settings),
        dialogs=dialogs,
        store=LocationStore(id_factory=id_factory),
        camera=MapCameraController(settings.camera, mounted=mounted),
        settings=settings.roster,
        dialog_settings=settings.dialogs,
        jitter=jitter,
    )
