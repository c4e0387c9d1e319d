"""
Pointer-driven drawing state machine and the session that owns it.

The erase control fires on pointer-down, not on a completed click, and is
hit-tested against the rectangle of the previously rendered frame.
"""
import logging
from enum import Enum
from typing import NamedTuple

import numpy as np

from .canvas import Canvas
from .compositor import EMPTY_RECT, Rect, compose
from .spectrum import compute_spectrum

logger = logging.getLogger(__name__)


class PointerKind(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


class PointerEvent(NamedTuple):
    kind: PointerKind
    x: int
    y: int


class InteractionState:
    def __init__(self):
        self.dragging = False
        self.last_point = (0, 0)
        self.control_armed = False
        self.control_rect: Rect = EMPTY_RECT


def handle_event(state: InteractionState, canvas: Canvas, event: PointerEvent) -> bool:
    """Applies one pointer event. Always returns True (redraw requested)."""
    point = (event.x, event.y)
    if event.kind is PointerKind.MOVE:
        if state.dragging: canvas.stroke_segment(state.last_point, point)
    elif event.kind is PointerKind.UP:
        state.dragging = False
        state.control_armed = False
    elif event.kind is PointerKind.DOWN:
        state.dragging = True
        canvas.stamp_point(point)
        if state.control_rect.contains(event.x, event.y):
            logger.debug("Erase control hit at %s", point)
            state.control_armed = True
            canvas.reset_to_blank()
    state.last_point = point
    return True


class PaintSession:
    """Context object the display driver owns: canvas, state and rendering."""

    def __init__(self, canvas: Canvas):
        self.canvas = canvas
        self.state = InteractionState()

    def render(self) -> np.ndarray:
        spectrum = compute_spectrum(self.canvas.raster)
        frame, rect = compose(self.canvas.raster, spectrum, self.state.control_armed)
        self.state.control_rect = rect
        return frame

    def dispatch(self, event: PointerEvent) -> np.ndarray:
        """Applies ``event`` and returns the fresh frame; every event redraws."""
        logger.debug("Pointer %s at (%d, %d)", event.kind.value, event.x, event.y)
        handle_event(self.state, self.canvas, event)
        return self.render()

    def pointer_down(self, x, y): return self.dispatch(PointerEvent(PointerKind.DOWN, x, y))
    def pointer_move(self, x, y): return self.dispatch(PointerEvent(PointerKind.MOVE, x, y))
    def pointer_up(self, x, y): return self.dispatch(PointerEvent(PointerKind.UP, x, y))
