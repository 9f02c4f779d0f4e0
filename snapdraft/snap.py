"""
Magnetic snapping: the candidate catalog and the resolver that picks from it.

``build_catalog`` turns a scene snapshot into a flat list of ``SnapTarget``
values (grid lattice, line endpoints and midpoints, circle centers and
line/line intersections). ``resolve`` evaluates those candidates against a
pointer position and returns the best one inside a zoom-adaptive radius.
Both are pure; the catalog is simply rebuilt whenever the scene changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from snapdraft.elements import ElementKind, SceneElement, kind_of
from snapdraft.geometry import Point, distance, line_intersection, midpoint

DEFAULT_SNAP_RADIUS = 20.0
TIE_DISTANCE = 0.1


class SnapKind(str, Enum):
    GRID = "grid"
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"
    INTERSECTION = "intersection"
    CENTER = "center"


PRIORITY = {
    SnapKind.GRID: 0,
    SnapKind.MIDPOINT: 1,
    SnapKind.ENDPOINT: 2,
    SnapKind.CENTER: 2,
    SnapKind.INTERSECTION: 3,
}


@dataclass(frozen=True)
class SnapTarget:
    point: Point
    kind: SnapKind
    priority: int
    source: Optional[int] = None  # index into the scene snapshot, never the element itself


@dataclass(frozen=True)
class SnapResult:
    original: Point
    snapped: Point
    target: SnapTarget
    distance: float


def _target(point: Point, kind: SnapKind, source: Optional[int] = None) -> SnapTarget:
    return SnapTarget(point=Point(float(point[0]), float(point[1])), kind=kind, priority=PRIORITY[kind], source=source)


def grid_targets(canvas_width: float, canvas_height: float, grid_spacing: float) -> List[SnapTarget]:
    """One target per lattice node covering ``[0, width] x [0, height]``."""
    if grid_spacing <= 0.0 or canvas_width < 0.0 or canvas_height < 0.0:
        return []
    cols = int(canvas_width / grid_spacing) + 1
    rows = int(canvas_height / grid_spacing) + 1
    xs = np.arange(cols, dtype=float) * grid_spacing
    ys = np.arange(rows, dtype=float) * grid_spacing
    gx, gy = np.meshgrid(xs, ys)
    return [_target(Point(float(x), float(y)), SnapKind.GRID) for x, y in zip(gx.ravel(), gy.ravel())]


def element_targets(elements: Sequence[SceneElement]) -> List[SnapTarget]:
    """Feature points of the scene plus pairwise line intersections."""
    targets: List[SnapTarget] = []
    lines = []
    for index, element in enumerate(elements):
        kind = kind_of(element)
        if kind is ElementKind.LINE:
            targets.append(_target(element.start, SnapKind.ENDPOINT, index))
            targets.append(_target(element.end, SnapKind.ENDPOINT, index))
            targets.append(_target(midpoint(element.start, element.end), SnapKind.MIDPOINT, index))
            lines.append(element)
        elif kind is ElementKind.CIRCLE:
            targets.append(_target(element.center, SnapKind.CENTER, index))
        elif kind in (ElementKind.STROKE, ElementKind.ANGLE):
            continue
        else:  # pragma: no cover - new kinds must be handled explicitly
            raise TypeError(f"No snap features defined for {kind}")

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            a, b = lines[i], lines[j]
            hit = line_intersection(a.start, a.end, b.start, b.end)
            if hit is not None:
                targets.append(_target(hit, SnapKind.INTERSECTION))
    return targets


def build_catalog(
    elements: Sequence[SceneElement],
    canvas_width: float,
    canvas_height: float,
    grid_spacing: float,
) -> List[SnapTarget]:
    """Full candidate list for a scene; duplicates are left for ``resolve`` to rank."""
    return grid_targets(canvas_width, canvas_height, grid_spacing) + element_targets(elements)


def effective_radius(base_radius: float, zoom: float) -> float:
    """Capture radius in canvas units: wider zoomed out, tighter zoomed in."""
    return float(base_radius) / max(float(zoom), 1e-9)


def resolve(
    point: Point,
    catalog: Sequence[SnapTarget],
    zoom: float = 1.0,
    base_radius: float = DEFAULT_SNAP_RADIUS,
    enabled: bool = True,
) -> Optional[SnapResult]:
    """
    Return the best snap for ``point`` or ``None`` when nothing qualifies.

    Targets farther than ``base_radius / zoom`` are ignored. Among the rest,
    distances within 0.1 of each other count as equal and the higher
    priority wins; otherwise the nearer target wins.
    """
    if not enabled or not catalog:
        return None
    radius = effective_radius(base_radius, zoom)
    px, py = float(point[0]), float(point[1])
    origin = Point(px, py)

    best: Optional[SnapTarget] = None
    best_dist = float("inf")
    for target in catalog:
        d = distance(origin, target.point)
        if d > radius:
            continue
        if best is None:
            best, best_dist = target, d
        elif abs(d - best_dist) < TIE_DISTANCE:
            if target.priority > best.priority or (target.priority == best.priority and d < best_dist):
                best, best_dist = target, d
        elif d < best_dist:
            best, best_dist = target, d

    if best is None:
        return None
    return SnapResult(original=origin, snapped=best.point, target=best, distance=best_dist)


def snap_point(
    point: Point,
    catalog: Sequence[SnapTarget],
    zoom: float = 1.0,
    base_radius: float = DEFAULT_SNAP_RADIUS,
    enabled: bool = True,
) -> Point:
    """Convenience wrapper returning the snapped point or the raw one."""
    result = resolve(point, catalog, zoom=zoom, base_radius=base_radius, enabled=enabled)
    if result is None:
        return Point(float(point[0]), float(point[1]))
    return result.snapped


__all__ = [
    "DEFAULT_SNAP_RADIUS",
    "SnapKind",
    "SnapTarget",
    "SnapResult",
    "PRIORITY",
    "grid_targets",
    "element_targets",
    "build_catalog",
    "effective_radius",
    "resolve",
    "snap_point",
]
