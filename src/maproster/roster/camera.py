"""
Map camera coordination.

The controller holds one camera intent at a time and hands it to the rendering
surface, either by polling (`consume`) or by subscription (`subscribe`). Intents
raised while the map view is not mounted are kept as pending and issued on
`mount()`; a recenter requested before any position is known waits for
`update_position()`.
"""

from __future__ import annotations

import logging
from typing import Callable

from maproster.config.settings import CameraSettings
from maproster.domain.models import CameraIntent, CameraIntentKind, Point, UserPosition

logger = logging.getLogger(__name__)

IntentListener = Callable[[CameraIntent], None]


class MapCameraController:
    def __init__(self, settings: CameraSettings | None = None, *, mounted: bool = False):
        self._settings = settings or CameraSettings()
        self._mounted = mounted
        self._current: CameraIntent | None = None
        self._pending: CameraIntent | None = None
        self._unconsumed = False
        self._recenter_waiting_for_position = False
        self._listeners: list[IntentListener] = []

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def current(self) -> CameraIntent | None:
        """Last intent issued to the view."""
        return self._current

    @property
    def pending(self) -> CameraIntent | None:
        """Intent held back until the view mounts."""
        return self._pending

    @property
    def awaiting_position(self) -> bool:
        return self._recenter_waiting_for_position

    def subscribe(self, listener: IntentListener) -> Callable[[], None]:
        """Register a listener for issued intents; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def consume(self) -> CameraIntent | None:
        """Return the latest issued intent once; later calls return None until a new one."""
        if not self._unconsumed:
            return None
        self._unconsumed = False
        return self._current

    def mount(self) -> None:
        self._mounted = True
        if self._pending is not None:
            intent, self._pending = self._pending, None
            self._issue(intent)

    def unmount(self) -> None:
        self._mounted = False

    def recenter(self, user_position: UserPosition | None) -> None:
        if user_position is None:
            logger.debug("Recenter deferred until a position is available")
            self._recenter_waiting_for_position = True
            return
        self._recenter_waiting_for_position = False
        self._request("recenter", user_position.lat, user_position.lng, self._settings.recenter_span_deg)

    def zoom_to(self, point: Point) -> None:
        self._request("zoom_to", point.lat, point.lng, self._settings.zoom_span_deg)

    def frame_new_point(self, point: Point) -> None:
        self._request("frame_new_point", point.lat, point.lng, self._settings.new_point_span_deg)

    def update_position(self, user_position: UserPosition) -> None:
        """Release a deferred recenter once a position becomes available."""
        if self._recenter_waiting_for_position:
            self.recenter(user_position)

    def _request(self, kind: CameraIntentKind, lat: float, lng: float, span_deg: float) -> None:
        intent = CameraIntent(kind=kind, lat=lat, lng=lng, lat_delta=span_deg, lng_delta=span_deg)
        if not self._mounted:
            logger.debug("Map not mounted; holding %s intent", kind)
            self._pending = intent
            return
        self._issue(intent)

    def _issue(self, intent: CameraIntent) -> None:
        self._current = intent
        self._unconsumed = True
        for listener in list(self._listeners):
            listener(intent)
