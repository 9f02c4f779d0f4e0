"""SnapDraft: magnetic snapping and drafting instruments for a 2D canvas."""

from snapdraft.config import DraftSettings, load_settings
from snapdraft.elements import (
    AngleElement,
    CircleElement,
    ElementKind,
    LineElement,
    StrokeElement,
    StrokeStyle,
)
from snapdraft.geometry import Point
from snapdraft.session import DrawingSession, Frame, ToolKind
from snapdraft.snap import SnapKind, SnapResult, SnapTarget, build_catalog, resolve

__all__ = [
    "AngleElement",
    "CircleElement",
    "DraftSettings",
    "DrawingSession",
    "ElementKind",
    "Frame",
    "LineElement",
    "Point",
    "SnapKind",
    "SnapResult",
    "SnapTarget",
    "StrokeElement",
    "StrokeStyle",
    "ToolKind",
    "build_catalog",
    "load_settings",
    "resolve",
]

__version__ = "0.1.0"
