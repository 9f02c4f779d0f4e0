"""Pydantic documents accepted by the ``snapdraft`` developer commands."""
from __future__ import annotations

from typing import Annotated, Iterable, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from snapdraft.config import DraftSettings
from snapdraft.elements import (
    AngleElement,
    CircleElement,
    LineElement,
    SceneElement,
    StrokeElement,
    StrokeStyle,
)
from snapdraft.geometry import Point

Pair = Tuple[float, float]


class StyleModel(BaseModel):
    color: str = Field("#000000", description="Stroke colour as a hex string.")
    width: float = Field(2.0, gt=0.0, description="Stroke width in canvas units.")

    def to_style(self) -> StrokeStyle:
        return StrokeStyle(color=self.color, width=self.width)


class LineModel(BaseModel):
    type: Literal["line"] = "line"
    start: Pair = Field(..., description="First endpoint (x, y).")
    end: Pair = Field(..., description="Second endpoint (x, y).")
    style: StyleModel = Field(default_factory=StyleModel)

    def to_element(self) -> LineElement:
        return LineElement(start=Point(*self.start), end=Point(*self.end), style=self.style.to_style())


class CircleModel(BaseModel):
    type: Literal["circle"] = "circle"
    center: Pair = Field(..., description="Circle centre (x, y).")
    radius: float = Field(..., gt=0.0, description="Circle radius in canvas units.")
    style: StyleModel = Field(default_factory=StyleModel)

    def to_element(self) -> CircleElement:
        return CircleElement(center=Point(*self.center), radius=self.radius, style=self.style.to_style())


class StrokeModel(BaseModel):
    type: Literal["stroke"] = "stroke"
    points: List[Pair] = Field(..., description="Sampled freehand points (x, y).")
    style: StyleModel = Field(default_factory=StyleModel)

    @field_validator("points", mode="before")
    @classmethod
    def _coerce_points(cls, value: Iterable[Sequence[float]] | None) -> List[Pair]:
        pts: List[Pair] = []
        if value is None:
            return pts
        for pair in value:
            if len(pair) != 2:
                raise ValueError("Stroke points must be 2D sequences")
            pts.append((float(pair[0]), float(pair[1])))
        return pts

    def to_element(self) -> StrokeElement:
        return StrokeElement(points=tuple(Point(*p) for p in self.points), style=self.style.to_style())


class AngleModel(BaseModel):
    type: Literal["angle"] = "angle"
    vertex: Pair
    start_angle: float
    end_angle: float
    style: StyleModel = Field(default_factory=lambda: StyleModel(color="#ff0000"))

    def to_element(self) -> AngleElement:
        return AngleElement(
            vertex=Point(*self.vertex),
            start_angle=self.start_angle,
            end_angle=self.end_angle,
            style=self.style.to_style(),
        )


ElementModel = Annotated[
    Union[LineModel, CircleModel, StrokeModel, AngleModel],
    Field(discriminator="type"),
]


class SceneDocument(BaseModel):
    elements: List[ElementModel] = Field(default_factory=list, description="Scene elements in commit order.")

    def to_elements(self) -> Tuple[SceneElement, ...]:
        return tuple(model.to_element() for model in self.elements)


Action = Literal["down", "move", "up", "long_press", "tool", "rotate", "zoom", "snap", "undo", "redo", "clear"]
_POINTER_ACTIONS = ("down", "move", "up", "long_press")


class GestureEvent(BaseModel):
    action: Action = Field(..., description="What the host UI did.")
    x: Optional[float] = None
    y: Optional[float] = None
    tool: Optional[str] = Field(None, description="Tool name for the 'tool' action.")
    value: Optional[float] = Field(None, description="Degrees for 'rotate', scale for 'zoom', 0/1 for 'snap'.")

    @model_validator(mode="after")
    def _check_arguments(self) -> "GestureEvent":
        if self.action in _POINTER_ACTIONS and (self.x is None or self.y is None):
            raise ValueError(f"'{self.action}' events need x and y")
        if self.action == "tool" and not self.tool:
            raise ValueError("'tool' events need a tool name")
        if self.action in ("rotate", "zoom", "snap") and self.value is None:
            raise ValueError(f"'{self.action}' events need a value")
        return self

    @property
    def point(self) -> Point:
        return Point(float(self.x or 0.0), float(self.y or 0.0))


class GestureScript(BaseModel):
    settings: DraftSettings = Field(default_factory=DraftSettings)
    scene: SceneDocument = Field(default_factory=SceneDocument, description="Elements present before replay.")
    events: List[GestureEvent] = Field(default_factory=list)


__all__ = [
    "StyleModel",
    "LineModel",
    "CircleModel",
    "StrokeModel",
    "AngleModel",
    "SceneDocument",
    "GestureEvent",
    "GestureScript",
]
