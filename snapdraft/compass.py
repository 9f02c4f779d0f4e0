"""Compass instrument state: a fixed center and a tracked radius."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from snapdraft.elements import CircleElement, StrokeStyle
from snapdraft.geometry import Point, distance

MIN_RADIUS = 5.0


class CompassPhase(str, Enum):
    HIDDEN = "hidden"
    CENTERED = "centered"
    RADIUSING = "radiusing"


@dataclass(frozen=True)
class CompassTool:
    center: Point = Point(0.0, 0.0)
    radius: float = 0.0
    phase: CompassPhase = CompassPhase.HIDDEN

    @property
    def visible(self) -> bool:
        return self.phase is not CompassPhase.HIDDEN

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    def centered_at(self, center: Point) -> "CompassTool":
        return CompassTool(center=Point(*center), radius=0.0, phase=CompassPhase.CENTERED)

    def with_radius_to(self, point: Point) -> "CompassTool":
        """Track the pointer; the radius never drops below ``MIN_RADIUS``."""
        radius = max(MIN_RADIUS, distance(self.center, point))
        return replace(self, radius=radius, phase=CompassPhase.RADIUSING)

    def hidden(self) -> "CompassTool":
        return CompassTool()

    def to_circle(self, style: StrokeStyle) -> CircleElement:
        return CircleElement(center=self.center, radius=self.radius, style=style)


__all__ = ["MIN_RADIUS", "CompassPhase", "CompassTool"]
