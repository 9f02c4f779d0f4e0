"""Protractor instrument state.

The protractor measures the angle between two rays sharing a vertex. The
first ray is drawn freely; the second is pulled toward common drafting angles
unless the pointer is dragged far enough away to override the pull.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from snapdraft.angles import nearest_protractor_angle
from snapdraft.elements import LineElement, StrokeStyle
from snapdraft.geometry import Point, cross, distance, heading, polar, ray_angle, translate

OVERRIDE_DISTANCE = 20.0
GRAB_RADIUS = 30.0


class ProtractorPhase(str, Enum):
    EMPTY = "empty"
    FIRST_LINE_ACTIVE = "first_line_active"
    FIRST_LINE_COMPLETE = "first_line_complete"
    SECOND_LINE_ACTIVE = "second_line_active"
    BOTH_COMPLETE = "both_complete"


_FIRST_DONE = (
    ProtractorPhase.FIRST_LINE_COMPLETE,
    ProtractorPhase.SECOND_LINE_ACTIVE,
    ProtractorPhase.BOTH_COMPLETE,
)


@dataclass(frozen=True)
class ProtractorTool:
    vertex: Point = Point(0.0, 0.0)
    first_endpoint: Point = Point(0.0, 0.0)
    second_endpoint: Point = Point(0.0, 0.0)
    phase: ProtractorPhase = ProtractorPhase.EMPTY

    # -- derived state -------------------------------------------------
    @property
    def visible(self) -> bool:
        return self.phase is not ProtractorPhase.EMPTY

    @property
    def drawing(self) -> bool:
        return self.phase in (ProtractorPhase.FIRST_LINE_ACTIVE, ProtractorPhase.SECOND_LINE_ACTIVE)

    @property
    def first_line_complete(self) -> bool:
        return self.phase in _FIRST_DONE

    @property
    def second_line_complete(self) -> bool:
        return self.phase is ProtractorPhase.BOTH_COMPLETE

    @property
    def angle(self) -> float:
        """Angle between the rays in degrees, always taken from the endpoints."""
        return ray_angle(self.vertex, self.first_endpoint, self.second_endpoint)

    def first_line_length(self) -> float:
        return distance(self.vertex, self.first_endpoint)

    def second_line_length(self) -> float:
        return distance(self.vertex, self.second_endpoint)

    def near_vertex(self, p: Point, threshold: float = GRAB_RADIUS) -> bool:
        return distance(p, self.vertex) <= threshold

    def near_first_endpoint(self, p: Point, threshold: float = GRAB_RADIUS) -> bool:
        return distance(p, self.first_endpoint) <= threshold

    def near_second_endpoint(self, p: Point, threshold: float = GRAB_RADIUS) -> bool:
        return distance(p, self.second_endpoint) <= threshold

    # -- transitions ---------------------------------------------------
    def started_at(self, vertex: Point) -> "ProtractorTool":
        v = Point(*vertex)
        return ProtractorTool(vertex=v, first_endpoint=v, second_endpoint=v, phase=ProtractorPhase.FIRST_LINE_ACTIVE)

    def with_first_endpoint(self, p: Point) -> "ProtractorTool":
        return replace(self, first_endpoint=Point(*p))

    def finish_first_line(self) -> "ProtractorTool":
        # A zero-length first ray gives nothing to measure against.
        if self.first_endpoint == self.vertex:
            return self.reset()
        return replace(self, phase=ProtractorPhase.FIRST_LINE_COMPLETE)

    def start_second_line(self) -> "ProtractorTool":
        if self.phase is not ProtractorPhase.FIRST_LINE_COMPLETE:
            return self
        return replace(self, second_endpoint=self.vertex, phase=ProtractorPhase.SECOND_LINE_ACTIVE)

    def with_second_endpoint(self, p: Point) -> "ProtractorTool":
        return replace(self, second_endpoint=Point(*p))

    def finish_second_line(self) -> "ProtractorTool":
        if self.second_endpoint == self.vertex:
            return replace(self, phase=ProtractorPhase.FIRST_LINE_COMPLETE)
        return replace(self, phase=ProtractorPhase.BOTH_COMPLETE)

    def moved_to(self, vertex: Point) -> "ProtractorTool":
        dx = vertex[0] - self.vertex[0]
        dy = vertex[1] - self.vertex[1]
        return replace(
            self,
            vertex=Point(*vertex),
            first_endpoint=translate(self.first_endpoint, dx, dy),
            second_endpoint=translate(self.second_endpoint, dx, dy),
        )

    def reset(self) -> "ProtractorTool":
        return ProtractorTool()

    # -- second-ray snapping -------------------------------------------
    def snapped_second_endpoint(
        self,
        proposed: Point,
        override_distance: float = OVERRIDE_DISTANCE,
    ) -> Tuple[Point, Optional[float]]:
        """Where the second endpoint should go for a proposed pointer position.

        Returns ``(point, snapped_angle)``. The proposed point is moved onto
        the nearest common angle (same side of the first ray, same ray
        length) when that position is within ``override_distance``; farther
        than that the user is overriding the pull and the raw point is kept
        with ``snapped_angle`` set to ``None``.
        """
        raw = Point(*proposed)
        nearest = nearest_protractor_angle(ray_angle(self.vertex, self.first_endpoint, raw))
        length = distance(self.vertex, raw)
        if nearest is None or length == 0.0:
            return raw, None
        side = 1.0 if cross(self.vertex, self.first_endpoint, raw) >= 0.0 else -1.0
        base = heading(self.vertex, self.first_endpoint)
        candidate = polar(self.vertex, base + side * nearest, length)
        if distance(raw, candidate) <= override_distance:
            return candidate, nearest
        return raw, None

    def to_lines(self, style: StrokeStyle) -> Tuple[LineElement, LineElement]:
        return (
            LineElement(start=self.vertex, end=self.first_endpoint, style=style),
            LineElement(start=self.vertex, end=self.second_endpoint, style=style),
        )


__all__ = ["OVERRIDE_DISTANCE", "ProtractorPhase", "ProtractorTool"]
