"""Freehand drawing with a live view of the canvas's Fourier magnitude."""
from .canvas import Canvas
from .compositor import Rect, compose
from .interaction import InteractionState, PaintSession, PointerEvent, PointerKind, handle_event
from .spectrum import compute_spectrum, swap_quadrants

__version__ = "0.1.0"
