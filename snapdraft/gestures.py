"""Gesture controllers driving the instrument state machines.

Each controller mirrors the canvas tool interface (press / move / release /
deactivate) and keeps exactly one immutable tool record in ``state``, which
it replaces wholesale on every step. Snapping and committing go through a
:class:`ToolContext` so the controllers never touch the scene directly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from snapdraft.compass import CompassPhase, CompassTool
from snapdraft.elements import CircleElement, SceneElement, StrokeElement, StrokeStyle
from snapdraft.geometry import Point, as_point, distance, heading, point_segment_distance
from snapdraft.hit_test import near_point
from snapdraft.protractor import OVERRIDE_DISTANCE, ProtractorPhase, ProtractorTool
from snapdraft.ruler import DEFAULT_RULER_LENGTH, RulerPhase, RulerTool
from snapdraft.set_square import DEFAULT_SIZE, SetSquarePhase, SetSquareTool
from snapdraft.snap import SnapResult

log = logging.getLogger(__name__)

RULER_END_GRAB = 30.0
RULER_BODY_GRAB = 20.0
TAP_SLOP = 4.0


@dataclass
class ToolContext:
    snap: Callable[[Point], Optional[SnapResult]]  # resolver over a freshly built catalog
    commit: Callable[[SceneElement], None]
    get_style: Callable[[], StrokeStyle]
    update_status: Callable[[str], None]
    ruler_length: float = DEFAULT_RULER_LENGTH
    set_square_size: float = DEFAULT_SIZE
    override_distance: float = OVERRIDE_DISTANCE


@dataclass(frozen=True)
class Step:
    """What one pointer event did: the point snap and/or angle snap applied."""

    snap: Optional[SnapResult] = None
    angle_snap: Optional[float] = None

    @property
    def feedback(self) -> bool:
        return self.snap is not None or self.angle_snap is not None


class GestureBase:
    """Common interface every gesture controller implements."""

    def __init__(self, ctx: ToolContext):
        self.ctx = ctx

    def pointer_down(self, p: Point) -> Step:
        return Step()

    def pointer_move(self, p: Point) -> Step:
        return Step()

    def pointer_up(self, p: Point) -> Step:
        return Step()

    def long_press(self, p: Point) -> Step:
        return Step()

    def deactivate(self) -> None:
        pass

    def _snapped(self, p: Point) -> Tuple[Point, Optional[SnapResult]]:
        raw = as_point(p)
        result = self.ctx.snap(raw)
        if result is None:
            return raw, None
        return result.snapped, result


class FreehandGesture(GestureBase):
    """Unsnapped pen; a tap leaves a dot."""

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._points: List[Point] = []

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def pointer_down(self, p: Point) -> Step:
        self._points = [as_point(p)]
        return Step()

    def pointer_move(self, p: Point) -> Step:
        if self._points:
            self._points.append(as_point(p))
        return Step()

    def pointer_up(self, p: Point) -> Step:
        if not self._points:
            return Step()
        style = self.ctx.get_style()
        if len(self._points) >= 2:
            self.ctx.commit(StrokeElement(points=tuple(self._points), style=style))
        else:
            self.ctx.commit(CircleElement(center=self._points[0], radius=style.width / 2.0, style=style))
        self._points = []
        return Step()

    def deactivate(self) -> None:
        self._points = []


class RulerGesture(GestureBase):
    """Place, then drag the body or swing an end; releasing draws along the edge."""

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self.state = RulerTool(length=ctx.ruler_length)
        self._last: Optional[Point] = None
        self._grabbed_start = False

    def pointer_down(self, p: Point) -> Step:
        raw = as_point(p)
        ruler = self.state
        if ruler.visible:
            if near_point(raw, ruler.start, RULER_END_GRAB) or near_point(raw, ruler.end, RULER_END_GRAB):
                self._grabbed_start = distance(raw, ruler.start) < distance(raw, ruler.end)
                self.state = ruler.with_phase(RulerPhase.ROTATING)
                return Step()
            if point_segment_distance(raw, ruler.start, ruler.end) <= RULER_BODY_GRAB:
                self._last = raw
                self.state = ruler.with_phase(RulerPhase.DRAGGING)
                return Step()
        point, result = self._snapped(raw)
        self.state = ruler.placed_at(point)
        self.ctx.update_status("Ruler: drag the edge to move it, an end to rotate it")
        return Step(snap=result)

    def pointer_move(self, p: Point) -> Step:
        raw = as_point(p)
        ruler = self.state
        if ruler.phase is RulerPhase.ROTATING:
            angle = heading(ruler.center, raw)
            if self._grabbed_start:
                angle += 180.0
            self.state = ruler.rotated_to(angle)
        elif ruler.phase is RulerPhase.DRAGGING and self._last is not None:
            self.state = ruler.translated(raw.x - self._last.x, raw.y - self._last.y)
            self._last = raw
        return Step()

    def pointer_up(self, p: Point) -> Step:
        ruler = self.state
        if ruler.phase in (RulerPhase.DRAGGING, RulerPhase.ROTATING):
            self.ctx.commit(ruler.to_line(self.ctx.get_style()))
            self.ctx.update_status(f"Ruler: line {ruler.distance():.1f} at {ruler.angle:.1f}°")
            self.state = ruler.hidden()
        self._last = None
        return Step()

    def deactivate(self) -> None:
        self.state = self.state.hidden()
        self._last = None


class CompassGesture(GestureBase):
    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self.state = CompassTool()

    def pointer_down(self, p: Point) -> Step:
        point, result = self._snapped(p)
        self.state = self.state.centered_at(point)
        return Step(snap=result)

    def pointer_move(self, p: Point) -> Step:
        if not self.state.visible:
            return Step()
        point, result = self._snapped(p)
        self.state = self.state.with_radius_to(point)
        return Step(snap=result)

    def pointer_up(self, p: Point) -> Step:
        compass = self.state
        if compass.phase is CompassPhase.RADIUSING and compass.radius > 0.0:
            self.ctx.commit(compass.to_circle(self.ctx.get_style()))
            self.ctx.update_status(f"Compass: circle r={compass.radius:.1f}")
        self.state = compass.hidden()
        return Step()

    def deactivate(self) -> None:
        self.state = self.state.hidden()


class ProtractorGesture(GestureBase):
    """Vertex and first ray in one drag, second ray in the next."""

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self.state = ProtractorTool()
        # last committed measurement, kept for the read-out after the reset
        self.measured: Optional[ProtractorTool] = None

    def pointer_down(self, p: Point) -> Step:
        tool = self.state
        if tool.phase in (ProtractorPhase.EMPTY, ProtractorPhase.BOTH_COMPLETE):
            point, result = self._snapped(p)
            self.state = tool.started_at(point)
            self.measured = None
            self.ctx.update_status("Protractor: drag out the first ray")
            return Step(snap=result)
        if tool.phase is ProtractorPhase.FIRST_LINE_COMPLETE:
            self.state = tool.start_second_line()
        return Step()

    def pointer_move(self, p: Point) -> Step:
        tool = self.state
        if not tool.drawing:
            return Step()
        point, result = self._snapped(p)
        if tool.phase is ProtractorPhase.FIRST_LINE_ACTIVE:
            self.state = tool.with_first_endpoint(point)
            return Step(snap=result)
        endpoint, snapped_angle = tool.snapped_second_endpoint(point, self.ctx.override_distance)
        self.state = tool.with_second_endpoint(endpoint)
        return Step(snap=result, angle_snap=snapped_angle)

    def pointer_up(self, p: Point) -> Step:
        tool = self.state
        if tool.phase is ProtractorPhase.FIRST_LINE_ACTIVE:
            self.state = tool.finish_first_line()
            if self.state.first_line_complete:
                self.ctx.update_status("Protractor: drag out the second ray")
        elif tool.phase is ProtractorPhase.SECOND_LINE_ACTIVE:
            finished = tool.finish_second_line()
            if finished.second_line_complete:
                self._commit(finished)
                self.state = finished.reset()
            else:
                self.state = finished
        return Step()

    def deactivate(self) -> None:
        if self.state.second_line_complete:
            self._commit(self.state)
        self.state = self.state.reset()

    def _commit(self, tool: ProtractorTool) -> None:
        self.measured = tool
        for line in tool.to_lines(self.ctx.get_style()):
            self.ctx.commit(line)
        self.ctx.update_status(f"Protractor: {tool.angle:.1f}°")
        log.debug("protractor committed vertex=%s angle=%.3f", tool.vertex, tool.angle)


class SetSquareGesture(GestureBase):
    """Passive overlay: resize by a vertex, move from inside, toggle at the hub."""

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self.state = SetSquareTool(size=ctx.set_square_size)
        self._press: Optional[Point] = None
        self._press_target: Optional[str] = None
        self._moved = False

    def pointer_down(self, p: Point) -> Step:
        raw = as_point(p)
        square = self.state
        self._press = raw
        self._moved = False
        if not square.visible:
            point, result = self._snapped(raw)
            self.state = square.placed_at(point)
            self._press_target = "placed"
            return Step(snap=result)
        index = square.vertex_at(raw)
        # hub before vertices: on a small square the hub lies within vertex reach
        if square.on_control(raw):
            self._press_target = "control"
        elif index >= 0:
            self.state = square.stop_resize().start_resize(index)
            self._press_target = "vertex"
        elif square.contains(raw):
            self.state = square.stop_resize().with_phase(SetSquarePhase.DRAGGING)
            self._press_target = "body"
        else:
            self._press_target = "outside"
        return Step()

    def pointer_move(self, p: Point) -> Step:
        raw = as_point(p)
        if self._press is None:
            return Step()
        if not self._moved and distance(raw, self._press) >= TAP_SLOP:
            self._moved = True
            if self._press_target == "control":
                self.state = self.state.with_phase(SetSquarePhase.DRAGGING)
                self._press_target = "body"
        square = self.state
        if square.phase is SetSquarePhase.RESIZING:
            point, result = self._snapped(raw)
            self.state = square.with_resize(square.vertex_index, point)
            return Step(snap=result)
        if square.phase is SetSquarePhase.DRAGGING and self._moved:
            point, result = self._snapped(raw)
            if square.contains(point):
                self.state = square.moved_to(point)
                return Step(snap=result)
        return Step()

    def pointer_up(self, p: Point) -> Step:
        if self._press is None:
            return Step()
        square = self.state
        result = None
        if not self._moved:
            if self._press_target == "control":
                square = square.with_variant_toggled()
                self.ctx.update_status(f"Set square: {square.variant.value}")
            elif self._press_target == "body":
                point, result = self._snapped(p)
                square = square.moved_to(point)
            elif self._press_target == "outside":
                point, result = self._snapped(p)
                square = square.placed_at(point)
        if square.phase in (SetSquarePhase.RESIZING, SetSquarePhase.DRAGGING):
            square = square.stop_resize()
        self.state = square
        self._press = None
        self._press_target = None
        self._moved = False
        return Step(snap=result)

    def long_press(self, p: Point) -> Step:
        if self.state.visible and self.state.contains(as_point(p)):
            self.state = self.state.hidden()
            self._press = None
            self.ctx.update_status("Set square hidden")
        return Step()

    def rotate_by(self, delta: float) -> None:
        if self.state.visible:
            self.state = self.state.rotated_by(delta)

    def deactivate(self) -> None:
        # The set square stays on the canvas as a reference; only the gesture ends.
        if self.state.phase in (SetSquarePhase.RESIZING, SetSquarePhase.DRAGGING):
            self.state = self.state.stop_resize()
        self._press = None
        self._press_target = None
        self._moved = False


__all__ = [
    "ToolContext",
    "Step",
    "GestureBase",
    "FreehandGesture",
    "RulerGesture",
    "CompassGesture",
    "ProtractorGesture",
    "SetSquareGesture",
]
