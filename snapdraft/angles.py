"""Angle snapping against fixed tables of drafting angles."""
from __future__ import annotations

from typing import Optional, Sequence

from snapdraft.geometry import angular_difference, normalize_degrees

COMMON_ANGLES = (0.0, 30.0, 45.0, 60.0, 90.0, 120.0, 135.0, 150.0, 180.0, 210.0, 225.0, 240.0, 270.0, 300.0, 315.0, 330.0)
PROTRACTOR_ANGLES = (30.0, 45.0, 60.0, 90.0, 120.0, 135.0, 150.0, 180.0)
ANGLE_SNAP_THRESHOLD = 5.0
AXIS_SNAP_THRESHOLD = 10.0
# measured angles carry float noise (50 deg reads as 50.00000000000001)
ANGLE_EPSILON = 1e-9


def snap_angle(
    raw: float,
    table: Sequence[float] = COMMON_ANGLES,
    threshold: float = ANGLE_SNAP_THRESHOLD,
) -> float:
    """Snap ``raw`` degrees to the first table entry within ``threshold``.

    The input is normalised to ``[0, 360)`` first and distances wrap at the
    0/360 seam, so 357 snaps to 0. Without a match the normalised angle is
    returned unchanged.
    """
    angle = normalize_degrees(raw)
    for candidate in table:
        if angular_difference(angle, candidate) <= threshold + ANGLE_EPSILON:
            return float(candidate)
    return angle


def snap_ruler_angle(raw: float) -> float:
    """Ruler variant: horizontal and vertical pull harder (10 deg) than the rest."""
    angle = normalize_degrees(raw)
    for axis in (0.0, 180.0, 90.0, 270.0):
        if angular_difference(angle, axis) <= AXIS_SNAP_THRESHOLD + ANGLE_EPSILON:
            return axis
    return snap_angle(angle)


def nearest_protractor_angle(
    angle: float,
    table: Sequence[float] = PROTRACTOR_ANGLES,
    threshold: float = ANGLE_SNAP_THRESHOLD,
) -> Optional[float]:
    """Table angle near ``angle`` or its reflection ``360 - angle``, else ``None``."""
    reflected = 360.0 - angle
    limit = threshold + ANGLE_EPSILON
    for candidate in table:
        if abs(angle - candidate) <= limit or abs(reflected - candidate) <= limit:
            return float(candidate)
    return None


__all__ = [
    "COMMON_ANGLES",
    "PROTRACTOR_ANGLES",
    "ANGLE_SNAP_THRESHOLD",
    "AXIS_SNAP_THRESHOLD",
    "ANGLE_EPSILON",
    "snap_angle",
    "snap_ruler_angle",
    "nearest_protractor_angle",
]
