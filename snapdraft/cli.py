"""Command line interface for inspecting SnapDraft snapping and gestures."""
from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Tuple

from snapdraft.angles import PROTRACTOR_ANGLES, nearest_protractor_angle, snap_angle, snap_ruler_angle
from snapdraft.config import DraftSettings
from snapdraft.elements import SceneElement, element_asdict
from snapdraft.geometry import Point
from snapdraft.schemas import GestureScript, SceneDocument
from snapdraft.session import DrawingSession
from snapdraft.snap import SnapKind, build_catalog, resolve


def _read_json(path: Path) -> object:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _read_scene(path: Path) -> Tuple[SceneElement, ...]:
    data = _read_json(path)
    if isinstance(data, list):
        data = {"elements": data}
    if not isinstance(data, dict):
        raise ValueError("Scene file must contain an object or a list of elements.")
    return SceneDocument.model_validate(data).to_elements()


def _cmd_catalog(args: argparse.Namespace) -> None:
    elements = _read_scene(Path(args.scene))
    catalog = build_catalog(elements, args.width, args.height, args.grid)
    counts = Counter(target.kind for target in catalog)
    print(f"Snap targets: {len(catalog)} (elements={len(elements)})")
    for kind in SnapKind:
        print(f"  - {kind.value}: {counts.get(kind, 0)}")


def _cmd_snap(args: argparse.Namespace) -> None:
    if args.zoom <= 0:
        raise ValueError("Zoom must be positive.")
    elements = _read_scene(Path(args.scene))
    catalog = build_catalog(elements, args.width, args.height, args.grid)
    result = resolve(Point(args.x, args.y), catalog, zoom=args.zoom, base_radius=args.radius)
    if result is None:
        print("no snap")
        return
    target = result.target
    source = "-" if target.source is None else str(target.source)
    print(
        f"{target.kind.value} ({result.snapped.x:.3f}, {result.snapped.y:.3f}) "
        f"distance={result.distance:.3f} priority={target.priority} source={source}"
    )


def _cmd_angle(args: argparse.Namespace) -> None:
    if args.protractor:
        nearest = nearest_protractor_angle(args.degrees, PROTRACTOR_ANGLES)
        print("no snap" if nearest is None else f"{nearest:g}")
    elif args.ruler:
        print(f"{snap_ruler_angle(args.degrees):g}")
    else:
        print(f"{snap_angle(args.degrees):g}")


def _cmd_replay(args: argparse.Namespace) -> None:
    data = _read_json(Path(args.script))
    if not isinstance(data, dict):
        raise ValueError("Gesture script must contain a JSON object.")
    script = GestureScript.model_validate(data)
    messages = []
    session = DrawingSession(script.settings, status=messages.append if args.verbose else None)
    session.load_scene(script.scene.to_elements())
    for event in script.events:
        action = event.action
        if action == "down":
            session.pointer_down(event.point)
        elif action == "move":
            session.pointer_move(event.point)
        elif action == "up":
            session.pointer_up(event.point)
        elif action == "long_press":
            session.long_press(event.point)
        elif action == "tool":
            session.select_tool(event.tool)
        elif action == "rotate":
            session.rotate_by(event.value)
        elif action == "zoom":
            session.set_zoom(event.value)
        elif action == "snap":
            session.set_snap_enabled(bool(event.value))
        elif action == "undo":
            session.undo()
        elif action == "redo":
            session.redo()
        elif action == "clear":
            session.clear_canvas()
    for message in messages:
        print(f"# {message}")
    print(json.dumps({"elements": [element_asdict(e) for e in session.elements]}, indent=2))


def _build_parser() -> argparse.ArgumentParser:
    defaults = DraftSettings()
    parser = argparse.ArgumentParser(
        prog="snapdraft",
        description="SnapDraft snapping and drafting-instrument tools",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_canvas_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--width", type=float, default=defaults.canvas_width, help="Canvas width")
        p.add_argument("--height", type=float, default=defaults.canvas_height, help="Canvas height")
        p.add_argument("--grid", type=float, default=defaults.grid_spacing, help="Grid spacing (0 disables the grid)")

    catalog = sub.add_parser("catalog", help="Count snap targets by kind for a scene")
    catalog.add_argument("scene", help="Path to a scene JSON file")
    add_canvas_args(catalog)
    catalog.set_defaults(func=_cmd_catalog)

    snap = sub.add_parser("snap", help="Resolve the snap target for a point")
    snap.add_argument("scene", help="Path to a scene JSON file")
    snap.add_argument("x", type=float)
    snap.add_argument("y", type=float)
    snap.add_argument("--zoom", type=float, default=defaults.zoom, help="View scale")
    snap.add_argument("--radius", type=float, default=defaults.base_snap_radius, help="Capture radius at zoom 1")
    add_canvas_args(snap)
    snap.set_defaults(func=_cmd_snap)

    angle = sub.add_parser("angle", help="Snap an angle in degrees")
    angle.add_argument("degrees", type=float)
    mode = angle.add_mutually_exclusive_group()
    mode.add_argument("--ruler", action="store_true", help="Use the ruler's axis-first snapping")
    mode.add_argument("--protractor", action="store_true", help="Match against protractor angles")
    angle.set_defaults(func=_cmd_angle)

    replay = sub.add_parser("replay", help="Replay a gesture script and print the scene")
    replay.add_argument("script", help="Path to a gesture script JSON file")
    replay.add_argument("--verbose", action="store_true", help="Print status messages")
    replay.set_defaults(func=_cmd_replay)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    try:
        args.func(args)
    except Exception as exc:  # pragma: no cover - CLI guard
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
