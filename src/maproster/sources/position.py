"""
Position source collaborators.

Device permission prompts and GPS acquisition live outside this package; the roster
only sees the `PositionSource` protocol. `StaticPositionSource` serves a fixed
coordinate for the CLI and tests.
"""

from __future__ import annotations

from typing import Protocol

from maproster.domain.errors import PositionUnavailableError
from maproster.domain.models import UserPosition


class PositionSource(Protocol):
    def request_permission(self) -> bool: ...

    async def get_current_position(self) -> UserPosition: ...


class StaticPositionSource:
    """Always grants permission and reports the same coordinate (or none)."""

    def __init__(self, position: UserPosition | None, *, granted: bool = True):
        self._position = position
        self._granted = granted

    def request_permission(self) -> bool:
        return self._granted

    async def get_current_position(self) -> UserPosition:
        if self._position is None:
            raise PositionUnavailableError("no position configured")
        return self._position
