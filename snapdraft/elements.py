"""Scene element value types.

The scene is an append-only tuple of elements owned by
:class:`snapdraft.session.DrawingSession`. Everything here is frozen: tools
propose new elements, nothing edits an element once committed.

Public API:
- StrokeStyle, LineElement, CircleElement, StrokeElement, AngleElement
- ElementKind, SceneElement, kind_of(element)
- element_asdict(element) for CLI/debug output
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Union

from snapdraft.geometry import Point


class ElementKind(str, Enum):
    LINE = "line"
    STROKE = "stroke"
    CIRCLE = "circle"
    ANGLE = "angle"


@dataclass(frozen=True)
class StrokeStyle:
    color: str = "#000000"
    width: float = 2.0

    def asdict(self) -> Dict[str, Any]:
        return {"color": self.color, "width": float(self.width)}


@dataclass(frozen=True)
class LineElement:
    start: Point
    end: Point
    style: StrokeStyle = field(default_factory=StrokeStyle)

    kind: ClassVar[ElementKind] = ElementKind.LINE


@dataclass(frozen=True)
class CircleElement:
    center: Point
    radius: float
    style: StrokeStyle = field(default_factory=StrokeStyle)

    kind: ClassVar[ElementKind] = ElementKind.CIRCLE


@dataclass(frozen=True)
class StrokeElement:
    """Freehand stroke kept as its sampled points."""

    points: Tuple[Point, ...]
    style: StrokeStyle = field(default_factory=StrokeStyle)

    kind: ClassVar[ElementKind] = ElementKind.STROKE


@dataclass(frozen=True)
class AngleElement:
    vertex: Point
    start_angle: float
    end_angle: float
    style: StrokeStyle = field(default_factory=lambda: StrokeStyle(color="#ff0000"))

    kind: ClassVar[ElementKind] = ElementKind.ANGLE


SceneElement = Union[LineElement, StrokeElement, CircleElement, AngleElement]

_KNOWN = (LineElement, StrokeElement, CircleElement, AngleElement)


def kind_of(element: object) -> ElementKind:
    """Return the tag of ``element``; anything outside the union is rejected."""
    if isinstance(element, _KNOWN):
        return element.kind
    raise TypeError(f"Unsupported scene element {type(element).__name__}")


def element_asdict(element: SceneElement) -> Dict[str, Any]:
    kind = kind_of(element)
    if kind is ElementKind.LINE:
        data: Dict[str, Any] = {"start": list(element.start), "end": list(element.end)}
    elif kind is ElementKind.CIRCLE:
        data = {"center": list(element.center), "radius": float(element.radius)}
    elif kind is ElementKind.STROKE:
        data = {"points": [list(p) for p in element.points]}
    elif kind is ElementKind.ANGLE:
        data = {
            "vertex": list(element.vertex),
            "start_angle": float(element.start_angle),
            "end_angle": float(element.end_angle),
        }
    else:  # pragma: no cover - kind_of already guards the union
        raise TypeError(f"Unhandled element kind {kind}")
    data["type"] = kind.value
    data["style"] = element.style.asdict()
    return data


__all__ = [
    "ElementKind",
    "StrokeStyle",
    "LineElement",
    "CircleElement",
    "StrokeElement",
    "AngleElement",
    "SceneElement",
    "kind_of",
    "element_asdict",
]
