"""Set square instrument state.

The triangle is never stored: ``vertices`` is recomputed from
``(center, size, angle, variant)`` on every access, so position, scale and
rotation cannot drift apart from the outline that is hit-tested and drawn.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

import numpy as np

from snapdraft.angles import snap_angle
from snapdraft.geometry import Point, distance, normalize_degrees
from snapdraft.hit_test import inside_control, inside_triangle, near_edge, near_vertex

DEFAULT_SIZE = 100.0
MIN_SIZE = 50.0
MAX_SIZE = 300.0


class SetSquareVariant(str, Enum):
    FORTY_FIVE = "45-45-90"
    THIRTY_SIXTY = "30-60-90"

    def toggled(self) -> "SetSquareVariant":
        if self is SetSquareVariant.FORTY_FIVE:
            return SetSquareVariant.THIRTY_SIXTY
        return SetSquareVariant.FORTY_FIVE


class SetSquarePhase(str, Enum):
    HIDDEN = "hidden"
    PLACED = "placed"
    RESIZING = "resizing"
    DRAGGING = "dragging"


def _local_outline(size: float, variant: SetSquareVariant) -> np.ndarray:
    half = size / 2.0
    if variant is SetSquareVariant.FORTY_FIVE:
        return np.array([[0.0, -half], [-half, half], [half, half]], dtype=float)
    height = half * math.sqrt(3.0)
    return np.array(
        [[0.0, -height * 2.0 / 3.0], [-half, height / 3.0], [half, height / 3.0]],
        dtype=float,
    )


@dataclass(frozen=True)
class SetSquareTool:
    center: Point = Point(0.0, 0.0)
    size: float = DEFAULT_SIZE
    angle: float = 0.0
    variant: SetSquareVariant = SetSquareVariant.FORTY_FIVE
    phase: SetSquarePhase = SetSquarePhase.HIDDEN
    vertex_index: int = -1

    @property
    def visible(self) -> bool:
        return self.phase is not SetSquarePhase.HIDDEN

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        rad = math.radians(self.angle)
        c, s = math.cos(rad), math.sin(rad)
        rotation = np.array([[c, -s], [s, c]])
        world = _local_outline(self.size, self.variant) @ rotation.T + np.array(self.center, dtype=float)
        a, b, d = (Point(float(x), float(y)) for x, y in world)
        return a, b, d

    @property
    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        v = self.vertices
        return ((v[0], v[1]), (v[1], v[2]), (v[2], v[0]))

    # -- hit tests -------------------------------------------------------
    def vertex_at(self, p: Point, threshold: float = 40.0) -> int:
        return near_vertex(p, self.vertices, threshold)

    def near_edge(self, p: Point, threshold: float = 10.0) -> bool:
        return near_edge(p, self.vertices, threshold)

    def contains(self, p: Point) -> bool:
        return inside_triangle(p, self.vertices)

    def on_control(self, p: Point) -> bool:
        return inside_control(p, self.center)

    # -- transitions -----------------------------------------------------
    def placed_at(self, center: Point) -> "SetSquareTool":
        return SetSquareTool(center=Point(*center), size=self.size, phase=SetSquarePhase.PLACED)

    def moved_to(self, center: Point) -> "SetSquareTool":
        return replace(self, center=Point(*center))

    def translated(self, dx: float, dy: float) -> "SetSquareTool":
        return replace(self, center=Point(self.center[0] + dx, self.center[1] + dy))

    def with_variant_toggled(self) -> "SetSquareTool":
        return replace(self, variant=self.variant.toggled())

    def with_rotation(self, angle: float) -> "SetSquareTool":
        return replace(self, angle=snap_angle(angle))

    def rotated_by(self, delta: float) -> "SetSquareTool":
        return self.with_rotation(normalize_degrees(self.angle + delta))

    def start_resize(self, vertex_index: int) -> "SetSquareTool":
        if not 0 <= vertex_index < 3:
            return self
        return replace(self, phase=SetSquarePhase.RESIZING, vertex_index=vertex_index)

    def with_resize(self, vertex_index: int, p: Point) -> "SetSquareTool":
        """Scale uniformly about ``center`` so the grabbed vertex follows ``p``.

        The shape keeps its angles whichever vertex is dragged; the size is
        clamped to ``[MIN_SIZE, MAX_SIZE]``.
        """
        if not 0 <= vertex_index < 3:
            return self
        grabbed = self.vertices[vertex_index]
        original = distance(self.center, grabbed)
        factor = distance(self.center, p) / original if original > 0.0 else 1.0
        size = min(MAX_SIZE, max(MIN_SIZE, self.size * factor))
        return replace(self, size=size)

    def stop_resize(self) -> "SetSquareTool":
        return replace(self, phase=SetSquarePhase.PLACED, vertex_index=-1)

    def with_phase(self, phase: SetSquarePhase) -> "SetSquareTool":
        return replace(self, phase=phase)

    def hidden(self) -> "SetSquareTool":
        return replace(self, phase=SetSquarePhase.HIDDEN, vertex_index=-1)


__all__ = [
    "DEFAULT_SIZE",
    "MIN_SIZE",
    "MAX_SIZE",
    "SetSquareVariant",
    "SetSquarePhase",
    "SetSquareTool",
]
