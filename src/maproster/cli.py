"""
MapRoster CLI entrypoint.

This CLI stands in for the map screen during local demos and debugging: it loads a
roster around a given position, prints the visible points, and offers a small
line-oriented session that drives `RosterController` the way taps would.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import shlex
from typing import Any, Callable

from maproster.config.settings import Settings, get_settings
from maproster.core.geo import GeoPoint, haversine_m
from maproster.core.logging import configure_logging
from maproster.domain.errors import MapRosterError
from maproster.domain.models import CameraIntent, Point, UserPosition
from maproster.roster.controller import RosterController
from maproster.roster.factory import build_controller
from maproster.sources.dialogs import ConsoleDialogs
from maproster.sources.position import StaticPositionSource


def format_point(point: Point, origin: UserPosition | None) -> str:
    """Render one list row: name, coordinates and distance from the user (if known)."""
    line = f"[{point.id}] {point.name}  lat={point.lat:.5f} lng={point.lng:.5f}"
    if origin is not None:
        line += f"  ({haversine_m(point, origin):.0f} m)"
    return line


def format_intent(intent: CameraIntent) -> str:
    return (
        f"camera: {intent.kind} -> ({intent.lat:.5f}, {intent.lng:.5f}) "
        f"span={intent.lat_delta:g}x{intent.lng_delta:g}"
    )


def _settings_for(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if getattr(args, "source", None):
        source = settings.source.model_copy(update={"kind": args.source})
        settings = settings.model_copy(update={"source": source})
    return settings


def _load_controller(args: argparse.Namespace, dialogs: ConsoleDialogs) -> RosterController:
    settings = _settings_for(args)
    position = UserPosition(lat=float(args.lat), lng=float(args.lng))
    controller = build_controller(
        settings,
        position_source=StaticPositionSource(position),
        dialogs=dialogs,
    )
    asyncio.run(controller.load())
    return controller


def _cmd_distance(args: argparse.Namespace) -> int:
    a = GeoPoint(lat=float(args.lat1), lng=float(args.lng1))
    b = GeoPoint(lat=float(args.lat2), lng=float(args.lng2))
    print(f"{haversine_m(a, b):.1f}")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    """Handle the `list` subcommand."""
    try:
        controller = _load_controller(args, ConsoleDialogs())
    except (MapRosterError, ValueError) as e:
        print(f"error: {e}")
        return 1

    if args.query:
        controller.search(args.query)
    if args.nearby:
        controller.toggle_proximity()

    visible = controller.visible_points
    if args.json:
        print(json.dumps([p.model_dump(mode="json") for p in visible], ensure_ascii=False, indent=2))
        return 0

    print(f"{len(visible)} of {len(controller.points)} locations")
    for p in visible:
        print(format_point(p, controller.user_position))
    return 0


def _parse_id(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        print(f"not an id: {value!r}")
        return None


def run_session(
    controller: RosterController,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read commands until `quit`/EOF and apply them to the controller."""
    unsubscribe = controller.camera.subscribe(lambda intent: write(format_intent(intent)))
    try:
        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            try:
                parts = shlex.split(line)
            except ValueError as e:
                write(f"could not parse command: {e}")
                continue
            if not parts:
                continue
            cmd, rest = parts[0].lower(), parts[1:]

            if cmd in {"quit", "exit"}:
                break
            if cmd == "list":
                for p in controller.visible_points:
                    write(format_point(p, controller.user_position))
            elif cmd == "search":
                controller.search(" ".join(rest))
            elif cmd == "nearby":
                on = controller.toggle_proximity()
                write(f"proximity filter {'on' if on else 'off'}")
            elif cmd == "add":
                point = controller.add()
                if point is not None:
                    write(f"added {format_point(point, controller.user_position)}")
            elif cmd == "recenter":
                controller.recenter()
            elif cmd in {"select", "edit", "delete"} and len(rest) == 1:
                point_id = _parse_id(rest[0])
                if point_id is None:
                    continue
                if cmd == "select":
                    controller.select(point_id)
                elif cmd == "edit":
                    controller.edit_name(point_id)
                else:
                    controller.delete(point_id)
            else:
                write("commands: list, search [TEXT], nearby, add, select ID, edit ID, delete ID, recenter, quit")
    finally:
        unsubscribe()


def _cmd_shell(args: argparse.Namespace) -> int:
    dialogs = ConsoleDialogs()
    try:
        controller = _load_controller(args, dialogs)
    except (MapRosterError, ValueError) as e:
        print(f"error: {e}")
        return 1
    current = controller.camera.current
    if current is not None:
        print(format_intent(current))
    run_session(controller)
    return 0


def _add_position_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", required=True, type=float, help="User latitude (degrees)")
    p.add_argument("--lng", required=True, type=float, help="User longitude (degrees)")
    p.add_argument(
        "--source",
        choices=["remote", "synthetic"],
        default=None,
        help="Initial data source (defaults to config `source.kind`)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the MapRoster CLI."""
    parser = argparse.ArgumentParser(prog="maproster")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Haversine distance in meters between two coordinates.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lng1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lng2", type=float)
    dist.set_defaults(func=_cmd_distance)

    lst = sub.add_parser("list", help="Load the roster around a position and print visible locations.")
    _add_position_args(lst)
    lst.add_argument("--query", type=str, default="", help="Case-insensitive name filter")
    lst.add_argument("--nearby", action="store_true", help="Only locations within the proximity radius")
    lst.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    lst.set_defaults(func=_cmd_list)

    sh = sub.add_parser("shell", help="Interactive roster session (add/edit/delete/select/recenter).")
    _add_position_args(sh)
    sh.set_defaults(func=_cmd_shell)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m maproster.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
