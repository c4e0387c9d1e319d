"""Single-channel drawing surface whose size suits the DFT."""
import logging

import numpy as np
import cv2

from .config import con_dict
from .spectrum import optimal_size

logger = logging.getLogger(__name__)


def _pt(p) -> tuple[int, int]:
    return int(round(p[0])), int(round(p[1]))


class Canvas:
    """Owns the float32 raster the user draws on (0 = ink, 1 = blank).

    Width and height are fixed at construction. Points outside the raster
    are clipped by OpenCV, never rejected.
    """

    def __init__(self, raster: np.ndarray, fill: float):
        self._raster = raster
        self.fill = fill

    @classmethod
    def create(cls, logical_width: int, logical_height: int, fill: float | None = None) -> "Canvas":
        if fill is None: fill = con_dict["background"]
        width = optimal_size(logical_width); height = optimal_size(logical_height)
        logger.info("Canvas %dx%d (logical %dx%d)", width, height, logical_width, logical_height)
        return cls(np.full((height, width), fill, dtype=np.float32), fill)

    @classmethod
    def from_raster(cls, raster: np.ndarray, fill: float | None = None) -> "Canvas":
        """Adopts an initial raster, padding right/bottom with the background value."""
        if fill is None: fill = con_dict["background"]
        src = np.asarray(raster, dtype=np.float32)
        if src.ndim != 2: raise ValueError(f"Expected a single-channel raster, got shape {src.shape}")
        h, w = src.shape
        opt_w = optimal_size(w); opt_h = optimal_size(h)
        padded = cv2.copyMakeBorder(src, 0, opt_h - h, 0, opt_w - w, cv2.BORDER_CONSTANT, value=fill)
        logger.info("Canvas %dx%d from %dx%d image", opt_w, opt_h, w, h)
        return cls(padded, fill)

    @property
    def raster(self) -> np.ndarray:
        """Read-only view; mutate through the drawing methods."""
        view = self._raster.view()
        view.flags.writeable = False
        return view

    @property
    def width(self) -> int: return self._raster.shape[1]
    @property
    def height(self) -> int: return self._raster.shape[0]

    def snapshot(self) -> np.ndarray: return self._raster.copy()

    def stroke_segment(self, p0, p1, ink: float | None = None, thickness: int | None = None):
        if ink is None: ink = con_dict["ink"]
        if thickness is None: thickness = con_dict["stroke_thickness"]
        cv2.line(self._raster, _pt(p0), _pt(p1), float(ink), max(1, int(thickness)))

    def stamp_point(self, p, ink: float | None = None):
        if ink is None: ink = con_dict["ink"]
        cv2.circle(self._raster, _pt(p), con_dict["dot_radius"], float(ink), thickness=-1)

    def reset_to_blank(self):
        self._raster[...] = self.fill
