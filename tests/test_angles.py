from __future__ import annotations

import pytest

from snapdraft.angles import COMMON_ANGLES, nearest_protractor_angle, snap_angle, snap_ruler_angle


def test_snap_angle_table_and_wrap() -> None:
    assert snap_angle(43.0) == 45.0
    assert snap_angle(357.0) == 0.0
    assert snap_angle(-2.0) == 0.0
    assert snap_angle(100.0) == pytest.approx(100.0)
    assert snap_angle(370.0) == pytest.approx(10.0)


def test_snap_angle_output_is_normalised() -> None:
    for raw in (-720.5, -10.0, 400.0, 1000.0):
        out = snap_angle(raw)
        assert 0.0 <= out < 360.0
        assert out in COMMON_ANGLES or out == pytest.approx(raw % 360.0)


def test_ruler_prefers_axes_with_wider_threshold() -> None:
    assert snap_ruler_angle(8.0) == 0.0
    assert snap_ruler_angle(352.0) == 0.0
    assert snap_ruler_angle(83.0) == 90.0
    assert snap_ruler_angle(189.0) == 180.0
    assert snap_ruler_angle(32.0) == 30.0
    assert snap_ruler_angle(20.0) == pytest.approx(20.0)


def test_protractor_table_checks_reflection() -> None:
    assert nearest_protractor_angle(47.0) == 45.0
    assert nearest_protractor_angle(178.0) == 180.0
    assert nearest_protractor_angle(312.0) == 45.0
    assert nearest_protractor_angle(100.0) is None
    assert nearest_protractor_angle(10.0) is None


def test_snapping_is_idempotent() -> None:
    for tenth in range(-3600, 7200, 7):
        once = snap_angle(tenth / 10.0)
        assert snap_angle(once) == once


def test_boundary_angles_snap_through_float_noise() -> None:
    assert nearest_protractor_angle(50.00000000000001) == 45.0
    assert nearest_protractor_angle(360.0 - 50.00000000000001) == 45.0
    assert snap_angle(50.00000000000001) == 45.0
    assert snap_ruler_angle(10.000000000000002) == 0.0
    assert nearest_protractor_angle(50.001) is None
