"""Hit-testing helpers for on-canvas instruments."""
from __future__ import annotations

from typing import Sequence

from snapdraft.geometry import Point, distance, point_segment_distance

VERTEX_GRAB_RADIUS = 40.0
EDGE_GRAB_RADIUS = 10.0
CONTROL_RADIUS = 30.0
DEGENERATE_EPS = 1e-3


def near_point(p: Point, target: Point, threshold: float) -> bool:
    return distance(p, target) <= threshold


def near_vertex(p: Point, vertices: Sequence[Point], threshold: float = VERTEX_GRAB_RADIUS) -> int:
    """Index of the first vertex within ``threshold`` of ``p``, or -1.

    This is a linear scan: when two vertices qualify the earlier one wins,
    even if the later one is closer.
    """
    for index, vertex in enumerate(vertices):
        if distance(p, vertex) <= threshold:
            return index
    return -1


def near_edge(p: Point, vertices: Sequence[Point], threshold: float = EDGE_GRAB_RADIUS) -> bool:
    """True when ``p`` lies within ``threshold`` of any edge of the closed polygon."""
    count = len(vertices)
    if count < 2:
        return False
    return any(
        point_segment_distance(p, vertices[i], vertices[(i + 1) % count]) <= threshold
        for i in range(count)
    )


def inside_triangle(p: Point, vertices: Sequence[Point]) -> bool:
    """Barycentric containment; a degenerate triangle contains nothing."""
    if len(vertices) != 3:
        return False
    p1, p2, p3 = vertices
    denom = (p2[1] - p3[1]) * (p1[0] - p3[0]) + (p3[0] - p2[0]) * (p1[1] - p3[1])
    if abs(denom) < DEGENERATE_EPS:
        return False
    a = ((p2[1] - p3[1]) * (p[0] - p3[0]) + (p3[0] - p2[0]) * (p[1] - p3[1])) / denom
    b = ((p3[1] - p1[1]) * (p[0] - p3[0]) + (p1[0] - p3[0]) * (p[1] - p3[1])) / denom
    c = 1.0 - a - b
    return a >= 0.0 and b >= 0.0 and c >= 0.0


def inside_control(p: Point, center: Point, radius: float = CONTROL_RADIUS) -> bool:
    """True when ``p`` falls on the round control drawn at ``center``."""
    return distance(p, center) <= radius


__all__ = [
    "VERTEX_GRAB_RADIUS",
    "EDGE_GRAB_RADIUS",
    "CONTROL_RADIUS",
    "near_point",
    "near_vertex",
    "near_edge",
    "inside_triangle",
    "inside_control",
]
