"""Ruler instrument state.

``RulerTool`` is an immutable record; every interaction step produces a new
copy. A fixed ``length`` is set once and the ruler is only ever moved or
rotated, never stretched, by the angle-snap recompute.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from snapdraft.angles import snap_ruler_angle
from snapdraft.elements import LineElement, StrokeStyle
from snapdraft.geometry import (
    Point,
    angular_difference,
    distance,
    heading,
    midpoint,
    normalize_degrees,
    translate,
)

DEFAULT_RULER_LENGTH = 200.0
RESNAP_TOLERANCE = 0.1


class RulerPhase(str, Enum):
    HIDDEN = "hidden"
    PLACED = "placed"
    DRAGGING = "dragging"
    ROTATING = "rotating"


def _span(center: Point, angle: float, length: float) -> tuple[Point, Point]:
    # both ends from one (cos, sin) pair so a 0 deg ruler stays exactly level
    rad = math.radians(angle)
    dx = length / 2.0 * math.cos(rad)
    dy = length / 2.0 * math.sin(rad)
    return Point(center[0] - dx, center[1] - dy), Point(center[0] + dx, center[1] + dy)


@dataclass(frozen=True)
class RulerTool:
    start: Point = Point(0.0, 0.0)
    end: Point = Point(0.0, 0.0)
    length: float = DEFAULT_RULER_LENGTH
    angle: float = 0.0
    phase: RulerPhase = RulerPhase.HIDDEN

    @property
    def visible(self) -> bool:
        return self.phase is not RulerPhase.HIDDEN

    @property
    def center(self) -> Point:
        return midpoint(self.start, self.end)

    def raw_angle(self) -> float:
        """Heading of ``start -> end`` as drawn, before any snapping."""
        return heading(self.start, self.end)

    def distance(self) -> float:
        return distance(self.start, self.end)

    def is_horizontal_or_vertical(self) -> bool:
        rem = normalize_degrees(self.raw_angle()) % 90.0
        return rem < 5.0 or rem > 85.0

    def placed_at(self, center: Point) -> "RulerTool":
        start, end = _span(center, self.angle, self.length)
        return replace(self, start=start, end=end, phase=RulerPhase.PLACED)

    def with_position(self, start: Point, end: Point) -> "RulerTool":
        """Adopt ``start``/``end``, snapping the orientation.

        When the snap moves the heading by more than 0.1 degrees the ruler is
        rebuilt around the segment midpoint at the snapped heading and at its
        own ``length``.
        """
        raw = heading(start, end)
        snapped = snap_ruler_angle(raw)
        if angular_difference(raw, snapped) > RESNAP_TOLERANCE:
            new_start, new_end = _span(midpoint(start, end), snapped, self.length)
            return replace(self, start=new_start, end=new_end, angle=snapped)
        return replace(self, start=Point(*start), end=Point(*end), angle=snapped)

    def rotated_to(self, angle: float) -> "RulerTool":
        """Spin about the midpoint to face ``angle`` (snapped like ``with_position``)."""
        start, end = _span(self.center, angle, self.length)
        return self.with_position(start, end)

    def translated(self, dx: float, dy: float) -> "RulerTool":
        return replace(self, start=translate(self.start, dx, dy), end=translate(self.end, dx, dy))

    def with_phase(self, phase: RulerPhase) -> "RulerTool":
        return replace(self, phase=phase)

    def hidden(self) -> "RulerTool":
        return RulerTool(length=self.length)

    def to_line(self, style: StrokeStyle) -> LineElement:
        return LineElement(start=self.start, end=self.end, style=style)


__all__ = ["DEFAULT_RULER_LENGTH", "RulerPhase", "RulerTool"]
