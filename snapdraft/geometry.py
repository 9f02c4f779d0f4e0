"""2D geometry primitives shared by the snap engine and the instruments."""
from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple

DET_EPS = 1e-3
BBOX_TOL = 0.1


class Point(NamedTuple):
    x: float
    y: float


Segment = Tuple[Point, Point]


def as_point(p) -> Point:
    """Coerce any ``(x, y)`` pair into a float :class:`Point`."""
    return Point(float(p[0]), float(p[1]))


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def midpoint(a: Point, b: Point) -> Point:
    return Point((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def translate(p: Point, dx: float, dy: float) -> Point:
    return Point(p[0] + dx, p[1] + dy)


def within_bbox(p: Point, a: Point, b: Point, tol: float = BBOX_TOL) -> bool:
    """Inclusive bounding-box test of ``p`` against segment ``a``-``b``."""
    min_x = min(a[0], b[0]) - tol
    max_x = max(a[0], b[0]) + tol
    min_y = min(a[1], b[1]) - tol
    max_y = max(a[1], b[1]) + tol
    return min_x <= p[0] <= max_x and min_y <= p[1] <= max_y


def line_intersection(p1: Point, p2: Point, q1: Point, q2: Point) -> Optional[Point]:
    """Intersection of two drawn segments, or ``None``.

    Each segment is written as ``a*x + b*y = c`` and the pair is solved by its
    determinant. Near-parallel pairs (``|det| < 1e-3``) give no intersection,
    and so does a crossing of the infinite lines that falls outside either
    segment's bounding box.
    """
    a1 = p2[1] - p1[1]
    b1 = p1[0] - p2[0]
    c1 = a1 * p1[0] + b1 * p1[1]

    a2 = q2[1] - q1[1]
    b2 = q1[0] - q2[0]
    c2 = a2 * q1[0] + b2 * q1[1]

    det = a1 * b2 - a2 * b1
    if abs(det) < DET_EPS:
        return None

    hit = Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)
    if within_bbox(hit, p1, p2) and within_bbox(hit, q1, q2):
        return hit
    return None


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    abx = b[0] - a[0]
    aby = b[1] - a[1]
    len_sq = abx * abx + aby * aby
    if len_sq == 0.0:
        return distance(p, a)
    t = ((p[0] - a[0]) * abx + (p[1] - a[1]) * aby) / len_sq
    t = max(0.0, min(1.0, t))
    return distance(p, Point(a[0] + abx * t, a[1] + aby * t))


def rotate_point(p: Point, center: Point, degrees: float) -> Point:
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    dx = p[0] - center[0]
    dy = p[1] - center[1]
    return Point(center[0] + dx * c - dy * s, center[1] + dx * s + dy * c)


def normalize_degrees(angle: float) -> float:
    """Map ``angle`` into ``[0, 360)``."""
    out = math.fmod(angle, 360.0)
    if out < 0.0:
        out += 360.0
    # fmod of a tiny negative value can round up to exactly 360.0
    if out >= 360.0:
        out = 0.0
    return out


def angular_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two headings, in degrees."""
    d = abs(normalize_degrees(a) - normalize_degrees(b))
    return min(d, 360.0 - d)


def heading(a: Point, b: Point) -> float:
    """Direction of ``a -> b`` in degrees, as returned by ``atan2``."""
    return math.degrees(math.atan2(b[1] - a[1], b[0] - a[0]))


def polar(center: Point, degrees: float, length: float) -> Point:
    rad = math.radians(degrees)
    return Point(center[0] + length * math.cos(rad), center[1] + length * math.sin(rad))


def ray_angle(vertex: Point, p1: Point, p2: Point) -> float:
    """Unsigned angle between rays ``vertex->p1`` and ``vertex->p2`` in ``[0, 180]``.

    A degenerate ray gives 0. The cosine is clamped into ``[-1, 1]`` before
    ``acos`` so rounding overshoot never leaves its domain.
    """
    v1x, v1y = p1[0] - vertex[0], p1[1] - vertex[1]
    v2x, v2y = p2[0] - vertex[0], p2[1] - vertex[1]
    mag1 = math.hypot(v1x, v1y)
    mag2 = math.hypot(v2x, v2y)
    if mag1 == 0.0 or mag2 == 0.0:
        return 0.0
    cos_angle = (v1x * v2x + v1y * v2y) / (mag1 * mag2)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.degrees(math.acos(cos_angle))


def cross(vertex: Point, p1: Point, p2: Point) -> float:
    """Z component of ``(p1 - vertex) x (p2 - vertex)``."""
    return (p1[0] - vertex[0]) * (p2[1] - vertex[1]) - (p1[1] - vertex[1]) * (p2[0] - vertex[0])


__all__ = [
    "Point",
    "Segment",
    "as_point",
    "distance",
    "midpoint",
    "translate",
    "within_bbox",
    "line_intersection",
    "point_segment_distance",
    "rotate_point",
    "normalize_degrees",
    "angular_difference",
    "heading",
    "polar",
    "ray_angle",
    "cross",
]
