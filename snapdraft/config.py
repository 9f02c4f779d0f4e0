"""Session settings and their JSON loader."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from snapdraft.elements import StrokeStyle

log = logging.getLogger(__name__)


class DraftSettings(BaseModel):
    grid_spacing: float = Field(20.0, gt=0.0, description="Distance between grid lattice nodes in canvas units.")
    snap_enabled: bool = Field(True, description="Master switch for magnetic point snapping.")
    base_snap_radius: float = Field(20.0, gt=0.0, description="Capture radius at zoom 1; divided by the zoom.")
    zoom: float = Field(1.0, gt=0.0, description="View scale used to adapt the capture radius.")
    canvas_width: float = Field(1080.0, ge=0.0, description="Width of the gridded drawing area.")
    canvas_height: float = Field(1920.0, ge=0.0, description="Height of the gridded drawing area.")
    stroke_color: str = Field("#000000", description="Colour applied to newly committed elements.")
    stroke_width: float = Field(2.0, gt=0.0, description="Stroke width applied to newly committed elements.")
    history_limit: int = Field(20, ge=1, description="Number of scene snapshots kept for undo.")
    ruler_length: float = Field(200.0, gt=0.0, description="Fixed length of the ruler edge.")
    set_square_size: float = Field(100.0, ge=50.0, le=300.0, description="Initial set square size.")

    @field_validator("stroke_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("stroke_color must not be empty")
        return text

    def stroke_style(self) -> StrokeStyle:
        return StrokeStyle(color=self.stroke_color, width=self.stroke_width)


def load_settings(path: str | Path | None = None) -> DraftSettings:
    """Read settings from a JSON object; a missing file yields defaults.

    Unreadable JSON is logged and ignored, but values that are present and
    invalid raise ``pydantic.ValidationError``.
    """
    if path is None:
        return DraftSettings()
    config_path = Path(path)
    if not config_path.exists():
        return DraftSettings()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data: Dict[str, Any] = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("ignoring unreadable settings file %s: %s", config_path, exc)
        return DraftSettings()
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {config_path} must contain a JSON object")
    return DraftSettings(**data)


__all__ = ["DraftSettings", "load_settings"]
