from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from snapdraft.config import DraftSettings, load_settings
from snapdraft.elements import StrokeStyle


def test_defaults() -> None:
    settings = DraftSettings()
    assert settings.grid_spacing == 20.0
    assert settings.base_snap_radius == 20.0
    assert settings.zoom == 1.0
    assert settings.history_limit == 20
    assert settings.stroke_style() == StrokeStyle("#000000", 2.0)


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        DraftSettings(grid_spacing=0.0)
    with pytest.raises(ValidationError):
        DraftSettings(zoom=-1.0)
    with pytest.raises(ValidationError):
        DraftSettings(stroke_color="  ")
    with pytest.raises(ValidationError):
        DraftSettings(set_square_size=20.0)


def test_load_settings_from_file(tmp_path: Path) -> None:
    path = tmp_path / "draft.json"
    path.write_text(json.dumps({"grid_spacing": 10, "snap_enabled": False}), encoding="utf-8")
    settings = load_settings(path)
    assert settings.grid_spacing == 10.0
    assert settings.snap_enabled is False


def test_missing_or_unreadable_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.json") == DraftSettings()
    assert load_settings(None) == DraftSettings()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_settings(broken) == DraftSettings()


def test_invalid_file_values_raise(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"zoom": 0}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)
