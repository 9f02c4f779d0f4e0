"""Drawing session: the single entry point a host UI talks to.

A session owns the scene (an append-only tuple of elements), the snap
settings, one gesture controller per instrument, and the undo history.
Pointer events are routed to the active controller; each call returns a
:class:`Frame` describing what the step produced.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from snapdraft.compass import CompassTool
from snapdraft.config import DraftSettings
from snapdraft.elements import SceneElement, StrokeStyle, kind_of
from snapdraft.geometry import Point, as_point
from snapdraft.gestures import (
    CompassGesture,
    FreehandGesture,
    GestureBase,
    ProtractorGesture,
    RulerGesture,
    SetSquareGesture,
    Step,
    ToolContext,
)
from snapdraft.history import UndoRedoManager
from snapdraft.protractor import ProtractorTool
from snapdraft.ruler import RulerTool
from snapdraft.set_square import SetSquareTool
from snapdraft.snap import SnapResult, build_catalog, resolve

log = logging.getLogger(__name__)


class ToolKind(str, Enum):
    FREEHAND = "freehand"
    RULER = "ruler"
    COMPASS = "compass"
    PROTRACTOR = "protractor"
    SET_SQUARE = "set_square"


@dataclass(frozen=True)
class Frame:
    tool: ToolKind
    ruler: RulerTool
    compass: CompassTool
    protractor: ProtractorTool
    set_square: SetSquareTool
    stroke: Tuple[Point, ...]
    snap: Optional[SnapResult]
    committed: Tuple[SceneElement, ...]
    snap_feedback: bool


def _coerce_tool(value: Union[str, ToolKind]) -> ToolKind:
    if isinstance(value, ToolKind):
        return value
    try:
        return ToolKind(str(value).strip().lower().replace("-", "_"))
    except ValueError as exc:
        raise ValueError(f"Unknown tool '{value}'") from exc


class DrawingSession:
    def __init__(
        self,
        settings: Optional[DraftSettings] = None,
        status: Optional[Callable[[str], None]] = None,
    ):
        self.settings = settings or DraftSettings()
        self._status = status
        self._elements: Tuple[SceneElement, ...] = ()
        self._pending: List[SceneElement] = []
        self._style = self.settings.stroke_style()
        self.history: UndoRedoManager[Tuple[SceneElement, ...]] = UndoRedoManager(self.settings.history_limit)
        self.history.save_state(self._elements)

        ctx = ToolContext(
            snap=self._snap,
            commit=self._commit,
            get_style=lambda: self._style,
            update_status=self.update_status,
            ruler_length=self.settings.ruler_length,
            set_square_size=self.settings.set_square_size,
        )
        self._freehand = FreehandGesture(ctx)
        self._ruler = RulerGesture(ctx)
        self._compass = CompassGesture(ctx)
        self._protractor = ProtractorGesture(ctx)
        self._set_square = SetSquareGesture(ctx)
        self._gestures: Dict[ToolKind, GestureBase] = {
            ToolKind.FREEHAND: self._freehand,
            ToolKind.RULER: self._ruler,
            ToolKind.COMPASS: self._compass,
            ToolKind.PROTRACTOR: self._protractor,
            ToolKind.SET_SQUARE: self._set_square,
        }
        self._tool = ToolKind.FREEHAND

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def elements(self) -> Tuple[SceneElement, ...]:
        return self._elements

    @property
    def tool(self) -> ToolKind:
        return self._tool

    @property
    def style(self) -> StrokeStyle:
        return self._style

    @property
    def ruler(self) -> RulerTool:
        return self._ruler.state

    @property
    def compass(self) -> CompassTool:
        return self._compass.state

    @property
    def protractor(self) -> ProtractorTool:
        return self._protractor.state

    @property
    def last_measurement(self) -> Optional[ProtractorTool]:
        """The most recently committed protractor reading, until the next vertex."""
        return self._protractor.measured

    @property
    def set_square(self) -> SetSquareTool:
        return self._set_square.state

    def update_status(self, message: str) -> None:
        log.debug("status: %s", message)
        if self._status is not None:
            self._status(message)

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------
    def pointer_down(self, point: Point) -> Frame:
        return self._dispatch("pointer_down", point)

    def pointer_move(self, point: Point) -> Frame:
        return self._dispatch("pointer_move", point)

    def pointer_up(self, point: Point) -> Frame:
        return self._dispatch("pointer_up", point)

    def long_press(self, point: Point) -> Frame:
        return self._dispatch("long_press", point)

    def _dispatch(self, method: str, point: Point) -> Frame:
        gesture = self._gestures[self._tool]
        step: Step = getattr(gesture, method)(as_point(point))
        return self._frame(step)

    # ------------------------------------------------------------------
    # Tool and view settings
    # ------------------------------------------------------------------
    def select_tool(self, kind: Union[str, ToolKind]) -> Frame:
        """Switch instruments; the outgoing one flushes or resets itself."""
        tool = _coerce_tool(kind)
        if tool is not self._tool:
            self._gestures[self._tool].deactivate()
            log.debug("tool %s -> %s", self._tool.value, tool.value)
            self._tool = tool
            self.update_status(f"Tool: {tool.value.replace('_', ' ')}")
        return self._frame(Step())

    def set_zoom(self, scale: float) -> None:
        self.settings = self.settings.model_copy(update={"zoom": self._positive("zoom", scale)})

    def set_grid_spacing(self, spacing: float) -> None:
        self.settings = self.settings.model_copy(update={"grid_spacing": self._positive("grid_spacing", spacing)})

    def set_snap_enabled(self, enabled: bool) -> None:
        self.settings = self.settings.model_copy(update={"snap_enabled": bool(enabled)})
        self.update_status("Snapping on" if enabled else "Snapping off")

    def resize_canvas(self, width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError("Canvas size must be non-negative")
        self.settings = self.settings.model_copy(update={"canvas_width": float(width), "canvas_height": float(height)})

    def set_stroke_style(self, style: StrokeStyle) -> None:
        if style.width <= 0:
            raise ValueError("Stroke width must be positive")
        self._style = style

    def rotate_by(self, delta: float) -> Frame:
        """Rotate the set square (when shown) by ``delta`` degrees."""
        self._set_square.rotate_by(float(delta))
        return self._frame(Step())

    @staticmethod
    def _positive(name: str, value: float) -> float:
        value = float(value)
        if value <= 0.0:
            raise ValueError(f"{name} must be positive, got {value}")
        return value

    # ------------------------------------------------------------------
    # Scene and history
    # ------------------------------------------------------------------
    def undo(self) -> bool:
        state = self.history.undo()
        if state is None:
            return False
        self._elements = state
        self.update_status("Undo")
        return True

    def redo(self) -> bool:
        state = self.history.redo()
        if state is None:
            return False
        self._elements = state
        self.update_status("Redo")
        return True

    def load_scene(self, elements: Sequence[SceneElement]) -> None:
        """Replace the scene wholesale and restart the history from it."""
        scene = tuple(elements)
        for element in scene:
            kind_of(element)
        self._elements = scene
        self.history.clear()
        self.history.save_state(self._elements)

    def clear_canvas(self) -> None:
        if not self._elements:
            self.history.clear()
            self.history.save_state(self._elements)
            return
        self._elements = ()
        self.history.save_state(self._elements)
        self.update_status("Canvas cleared")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _snap(self, point: Point) -> Optional[SnapResult]:
        settings = self.settings
        if not settings.snap_enabled:
            return None
        catalog = build_catalog(
            self._elements,
            settings.canvas_width,
            settings.canvas_height,
            settings.grid_spacing,
        )
        return resolve(
            point,
            catalog,
            zoom=settings.zoom,
            base_radius=settings.base_snap_radius,
            enabled=settings.snap_enabled,
        )

    def _commit(self, element: SceneElement) -> None:
        kind = kind_of(element)
        self._elements = self._elements + (element,)
        self._pending.append(element)
        self.history.save_state(self._elements)
        log.debug("committed %s (scene size %d)", kind.value, len(self._elements))

    def _frame(self, step: Step) -> Frame:
        committed = tuple(self._pending)
        self._pending.clear()
        return Frame(
            tool=self._tool,
            ruler=self._ruler.state,
            compass=self._compass.state,
            protractor=self._protractor.state,
            set_square=self._set_square.state,
            stroke=self._freehand.points,
            snap=step.snap,
            committed=committed,
            snap_feedback=step.feedback,
        )


__all__ = ["ToolKind", "Frame", "DrawingSession"]
