"""
Roster error taxonomy.

Load-time failures (`PermissionDeniedError`, `PositionUnavailableError`,
`ListingUnavailableError`) leave the controller in `loading`. `PointNotFoundError`
is raised by the store and swallowed by the controller, since every id it passes
comes from the current list.
"""

from __future__ import annotations


class MapRosterError(Exception):
    """Base class for roster errors."""


class PermissionDeniedError(MapRosterError):
    """Position access was refused; the roster stays empty."""


class PositionUnavailableError(MapRosterError):
    """No position fix could be acquired (yet)."""


class ListingUnavailableError(MapRosterError):
    """The initial point collection could not be fetched or parsed."""


class PointNotFoundError(MapRosterError, LookupError):
    """No point with the given id exists in the store."""

    def __init__(self, point_id: int):
        super().__init__(f"point not found: {point_id}")
        self.point_id = point_id


class RosterNotReadyError(MapRosterError):
    """A user action arrived before the roster finished loading."""
