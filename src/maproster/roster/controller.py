"""
Roster controller: the top-level coordinator.

It turns user actions (search, proximity toggle, add/select/edit/delete, recenter)
into `LocationStore` mutations and `MapCameraController` intents. The state machine
is `loading -> ready`; only `load()` awaits, everything after is synchronous.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Literal

from maproster.config.settings import DialogSettings, RosterSettings
from maproster.domain.errors import (
    PermissionDeniedError,
    PointNotFoundError,
    PositionUnavailableError,
    RosterNotReadyError,
)
from maproster.domain.models import Marker, Point, RosterState, UserPosition
from maproster.roster.camera import MapCameraController
from maproster.roster.filter import apply_filter
from maproster.roster.store import LocationStore
from maproster.sources.dialogs import Dialogs
from maproster.sources.initial_data import InitialDataSource
from maproster.sources.position import PositionSource

logger = logging.getLogger(__name__)

Jitter = Callable[[], tuple[float, float]]
RosterStatus = Literal["loading", "ready"]


def uniform_jitter(max_deg: float, rng: random.Random | None = None) -> Jitter:
    """Return a jitter function drawing (dlat, dlng) uniformly within ±max_deg."""
    r = rng or random.Random()
    if max_deg <= 0:
        return lambda: (0.0, 0.0)
    return lambda: (r.uniform(-max_deg, max_deg), r.uniform(-max_deg, max_deg))


class RosterController:
    def __init__(
        self,
        *,
        position_source: PositionSource,
        initial_source: InitialDataSource,
        dialogs: Dialogs,
        store: LocationStore | None = None,
        camera: MapCameraController | None = None,
        settings: RosterSettings | None = None,
        dialog_settings: DialogSettings | None = None,
        jitter: Jitter | None = None,
    ):
        self._position_source = position_source
        self._initial_source = initial_source
        self._dialogs = dialogs
        self._store = store or LocationStore()
        self._camera = camera or MapCameraController()
        self._settings = settings or RosterSettings()
        self._dialog_settings = dialog_settings or DialogSettings()
        self._jitter = jitter or uniform_jitter(self._settings.add_jitter_deg)

        self._status: RosterStatus = "loading"
        self._search_query = ""
        self._proximity_enabled = False
        self._user_position: UserPosition | None = None

    # ---- read side -------------------------------------------------------

    @property
    def status(self) -> RosterStatus:
        return self._status

    @property
    def camera(self) -> MapCameraController:
        return self._camera

    @property
    def user_position(self) -> UserPosition | None:
        return self._user_position

    @property
    def points(self) -> list[Point]:
        return self._store.list()

    @property
    def visible_points(self) -> list[Point]:
        return apply_filter(
            self._store.list(),
            self._search_query,
            self._proximity_enabled,
            self._user_position,
            radius_m=self._settings.proximity_radius_m,
        )

    def markers(self) -> list[Marker]:
        return [Marker.from_point(p) for p in self.visible_points]

    @property
    def state(self) -> RosterState:
        return RosterState(
            status=self._status,
            points=self._store.list(),
            search_query=self._search_query,
            proximity_enabled=self._proximity_enabled,
            user_position=self._user_position,
        )

    # ---- loading ---------------------------------------------------------

    async def load(self) -> None:
        """Acquire the user position and the initial points, then enter `ready`.

        Errors propagate with the controller still `loading`, so the caller may
        call `load()` again. Calling it once ready is a no-op.

        Raises:
            PermissionDeniedError: Position access was refused.
            PositionUnavailableError: No fix could be acquired.
            ListingUnavailableError: The initial collection could not be fetched.
        """
        if self._status == "ready":
            return

        if not self._position_source.request_permission():
            logger.warning("Position permission denied; roster stays empty")
            raise PermissionDeniedError("position permission denied")

        try:
            position = await self._position_source.get_current_position()
        except PositionUnavailableError:
            logger.info("No position fix yet; still loading")
            raise

        points = await self._initial_source.fetch(position)

        self._store.load(points)
        self._user_position = position
        self._status = "ready"
        logger.info("Roster ready with %d points", len(points))
        self._camera.recenter(position)

    def _require_ready(self) -> None:
        if self._status != "ready":
            raise RosterNotReadyError("roster is still loading")

    # ---- actions ---------------------------------------------------------

    def search(self, query: str) -> None:
        self._require_ready()
        self._search_query = query or ""

    def toggle_proximity(self) -> bool:
        self._require_ready()
        self._proximity_enabled = not self._proximity_enabled
        return self._proximity_enabled

    def update_position(self, position: UserPosition) -> None:
        """Accept a re-acquired fix; also releases a deferred recenter."""
        self._user_position = position
        self._camera.update_position(position)

    def add(self) -> Point | None:
        """Add a default-named point near the user and frame it; None without a position."""
        self._require_ready()
        if self._user_position is None:
            return None
        name = self._settings.default_name_template.format(n=len(self._store) + 1)
        dlat, dlng = self._jitter()
        point = self._store.add(name, self._user_position.lat + dlat, self._user_position.lng + dlng)
        self._camera.frame_new_point(point)
        return point

    def select(self, point_id: int) -> None:
        self._require_ready()
        try:
            point = self._store.get(point_id)
        except PointNotFoundError:
            logger.debug("Ignoring selection of unknown point id=%s", point_id)
            return
        self._camera.zoom_to(point)

    def edit_name(self, point_id: int) -> bool:
        """Prompt for a new name; returns True if the point was renamed."""
        self._require_ready()
        try:
            current = self._store.get(point_id)
        except PointNotFoundError:
            logger.debug("Ignoring edit of unknown point id=%s", point_id)
            return False

        ds = self._dialog_settings
        new_name = self._dialogs.prompt(ds.edit_title, ds.edit_message, current.name)
        if not new_name or not new_name.strip():
            return False
        try:
            self._store.rename(point_id, new_name)
        except PointNotFoundError:
            logger.debug("Point id=%s vanished before rename", point_id)
            return False
        return True

    def delete(self, point_id: int) -> bool:
        """Ask for confirmation, then remove; returns True if the point was removed."""
        self._require_ready()
        ds = self._dialog_settings
        if not self._dialogs.confirm(ds.delete_title, ds.delete_message):
            return False
        try:
            self._store.remove(point_id)
        except PointNotFoundError:
            logger.debug("Ignoring delete of unknown point id=%s", point_id)
            return False
        return True

    def recenter(self) -> None:
        self._require_ready()
        if self._user_position is None:
            return
        self._camera.recenter(self._user_position)
