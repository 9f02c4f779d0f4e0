from __future__ import annotations

import pytest
from pydantic import ValidationError

from snapdraft.elements import (
    AngleElement,
    CircleElement,
    ElementKind,
    LineElement,
    StrokeElement,
    element_asdict,
    kind_of,
)
from snapdraft.geometry import Point
from snapdraft.schemas import GestureEvent, GestureScript, SceneDocument


def test_scene_document_builds_elements() -> None:
    doc = SceneDocument.model_validate(
        {
            "elements": [
                {"type": "line", "start": [0, 0], "end": [10, 0], "style": {"color": "#123456", "width": 3}},
                {"type": "circle", "center": [5, 5], "radius": 2},
                {"type": "stroke", "points": [[0, 0], [1, 1], [2, 1]]},
                {"type": "angle", "vertex": [0, 0], "start_angle": 0, "end_angle": 90},
            ]
        }
    )
    line, circle, stroke, angle = doc.to_elements()
    assert isinstance(line, LineElement)
    assert line.end == (10.0, 0.0)
    assert line.style.color == "#123456"
    assert isinstance(circle, CircleElement)
    assert isinstance(stroke, StrokeElement)
    assert len(stroke.points) == 3
    assert isinstance(angle, AngleElement)
    assert angle.style.color == "#ff0000"


def test_scene_document_rejects_bad_elements() -> None:
    with pytest.raises(ValidationError):
        SceneDocument.model_validate({"elements": [{"type": "polygon", "points": []}]})
    with pytest.raises(ValidationError):
        SceneDocument.model_validate({"elements": [{"type": "circle", "center": [0, 0], "radius": -1}]})
    with pytest.raises(ValidationError):
        SceneDocument.model_validate({"elements": [{"type": "stroke", "points": [[0, 0, 0]]}]})


def test_gesture_events_require_their_arguments() -> None:
    assert GestureEvent(action="down", x=1, y=2).point == (1.0, 2.0)
    assert GestureEvent(action="undo").action == "undo"
    with pytest.raises(ValidationError):
        GestureEvent(action="move", x=1)
    with pytest.raises(ValidationError):
        GestureEvent(action="tool")
    with pytest.raises(ValidationError):
        GestureEvent(action="rotate")


def test_script_carries_settings() -> None:
    script = GestureScript.model_validate({"settings": {"grid_spacing": 5}, "events": [{"action": "clear"}]})
    assert script.settings.grid_spacing == 5.0
    assert script.scene.to_elements() == ()


def test_element_helpers() -> None:
    circle = CircleElement(Point(1, 2), 3.0)
    assert kind_of(circle) is ElementKind.CIRCLE
    data = element_asdict(circle)
    assert data["type"] == "circle"
    assert data["center"] == [1.0, 2.0]
    assert data["style"] == {"color": "#000000", "width": 2.0}
    with pytest.raises(TypeError):
        kind_of("not an element")
