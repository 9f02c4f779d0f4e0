from __future__ import annotations

import pytest

from snapdraft.elements import LineElement
from snapdraft.geometry import Point
from snapdraft.snap import (
    PRIORITY,
    SnapKind,
    SnapTarget,
    build_catalog,
    effective_radius,
    resolve,
    snap_point,
)


def _target(x: float, y: float, kind: SnapKind) -> SnapTarget:
    return SnapTarget(point=Point(x, y), kind=kind, priority=PRIORITY[kind])


def test_empty_or_disabled_gives_no_snap() -> None:
    assert resolve(Point(0, 0), []) is None
    catalog = [_target(0, 0, SnapKind.GRID)]
    assert resolve(Point(1, 1), catalog, enabled=False) is None


def test_targets_outside_radius_are_ignored() -> None:
    catalog = build_catalog((), 200, 200, 100)
    assert resolve(Point(50, 50), catalog) is None
    assert snap_point(Point(50, 50), catalog) == (50.0, 50.0)


def test_nearest_target_wins() -> None:
    catalog = build_catalog((), 100, 100, 20)
    result = resolve(Point(3, 1), catalog)
    assert result is not None
    assert result.snapped == (0.0, 0.0)
    assert result.original == (3.0, 1.0)
    assert result.distance == pytest.approx((3**2 + 1**2) ** 0.5)


def test_strictly_nearer_beats_priority() -> None:
    catalog = [_target(5, 0, SnapKind.INTERSECTION), _target(1, 0, SnapKind.GRID)]
    result = resolve(Point(0, 0), catalog)
    assert result is not None
    assert result.target.kind is SnapKind.GRID


def test_near_tie_prefers_priority_regardless_of_order() -> None:
    endpoint = _target(0.0, 0.0, SnapKind.ENDPOINT)
    midpoint = _target(0.05, 0.0, SnapKind.MIDPOINT)
    for catalog in ([endpoint, midpoint], [midpoint, endpoint]):
        result = resolve(Point(0, 0), catalog)
        assert result is not None
        assert result.target is endpoint


def test_zoom_shrinks_capture_radius() -> None:
    catalog = [_target(0, 0, SnapKind.GRID)]
    assert resolve(Point(15, 0), catalog, zoom=1.0) is not None
    assert resolve(Point(15, 0), catalog, zoom=2.0) is None
    assert resolve(Point(30, 0), catalog, zoom=0.5) is not None
    assert effective_radius(20.0, 2.0) == pytest.approx(10.0)
    assert effective_radius(20.0, 0.0) > 1e9


def test_intersection_beats_coincident_grid_and_midpoints() -> None:
    scene = (
        LineElement(Point(0, 0), Point(100, 0)),
        LineElement(Point(50, -50), Point(50, 50)),
    )
    catalog = build_catalog(scene, 100, 100, 10)
    result = resolve(Point(52, 2), catalog)
    assert result is not None
    assert result.target.kind is SnapKind.INTERSECTION
    assert result.snapped == (50.0, 0.0)
    assert result.distance == pytest.approx(2.828, abs=1e-3)


def test_radius_shrinks_monotonically_with_zoom() -> None:
    assert effective_radius(20.0, 2.0) < effective_radius(20.0, 1.0) < effective_radius(20.0, 0.5)


def test_midpoint_loses_equal_distance_tie_to_intersection() -> None:
    mid = _target(10.0, 0.0, SnapKind.MIDPOINT)
    hit = _target(0.0, 10.05, SnapKind.INTERSECTION)
    for catalog in ([mid, hit], [hit, mid]):
        result = resolve(Point(0, 0), catalog)
        assert result is not None
        assert result.target.kind is SnapKind.INTERSECTION
