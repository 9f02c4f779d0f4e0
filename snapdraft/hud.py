"""Precision read-outs shown next to the active instrument."""
from __future__ import annotations

from typing import List

from snapdraft.angles import nearest_protractor_angle
from snapdraft.compass import CompassTool
from snapdraft.protractor import ProtractorTool
from snapdraft.ruler import RulerTool

PX_TO_CM = 0.0264583333


def px_to_cm(value: float) -> float:
    return value * PX_TO_CM


def ruler_readout(ruler: RulerTool) -> List[str]:
    if not ruler.visible:
        return []
    # rounding first keeps a -1e-15 heading from printing as -0.0
    angle = round(ruler.raw_angle(), 1) + 0.0
    lines = [
        f"Distance: {px_to_cm(ruler.distance()):.1f} cm",
        f"Angle: {angle:.1f}°",
    ]
    if ruler.is_horizontal_or_vertical():
        rem = angle % 180.0
        lines.append("Horizontal" if rem < 45.0 or rem > 135.0 else "Vertical")
    return lines


def compass_readout(compass: CompassTool) -> List[str]:
    if not compass.visible:
        return []
    radius_cm = px_to_cm(compass.radius)
    return [
        f"Radius: {radius_cm:.1f} cm",
        f"Diameter: {radius_cm * 2.0:.1f} cm",
        f"Center: ({compass.center.x:.0f}, {compass.center.y:.0f})",
    ]


def protractor_readout(tool: ProtractorTool) -> List[str]:
    """Angle (with snap marker), completed ray lengths, then the vertex."""
    if not tool.visible:
        return []
    lines: List[str] = []
    angle = tool.angle
    if angle > 0.0:
        snapped = nearest_protractor_angle(angle)
        if snapped is not None:
            lines.append(f"Angle: {angle:.1f}° (Snapped)")
            lines.append(f"Snapped to: {snapped:g}°")
        else:
            lines.append(f"Angle: {angle:.1f}°")
    if tool.first_line_complete:
        lines.append(f"Line 1: {px_to_cm(tool.first_line_length()):.1f} cm")
    if tool.second_line_complete:
        lines.append(f"Line 2: {px_to_cm(tool.second_line_length()):.1f} cm")
    lines.append(f"Vertex: ({tool.vertex.x:.0f}, {tool.vertex.y:.0f})")
    return lines


__all__ = ["PX_TO_CM", "px_to_cm", "ruler_readout", "compass_readout", "protractor_readout"]
