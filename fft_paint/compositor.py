"""
Builds the display frame: annotated canvas on top, annotated spectrum below,
and a control bar holding the "Start over" button at the bottom.
"""
import logging
from typing import NamedTuple

import numpy as np
import cv2

from .config import con_dict

logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    def contains(self, px, py) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


EMPTY_RECT = Rect(0, 0, 0, 0)


def _blend_text(img: np.ndarray, text: str, org, value: float, thickness: int):
    # putText only rasterizes into 8-bit images; use its coverage as alpha.
    mask = np.zeros(img.shape[:2], dtype=np.uint8)
    cv2.putText(mask, text, org, FONT, con_dict["font_scale"], 255, thickness, cv2.LINE_AA)
    alpha = mask.astype(np.float32) / 255.0
    img[...] = img * (1.0 - alpha) + np.float32(value) * alpha


def put_halo_text(img: np.ndarray, text: str, org, halo: float, halo_thickness: int, ink: float):
    """Draws ``text`` twice into a float32 raster, in place.

    A heavy halo pass goes down first, then a thin full-contrast pass on top.
    """
    _blend_text(img, text, org, halo, halo_thickness)
    _blend_text(img, text, org, ink, 1)


def _fit_width(spectrum: np.ndarray, shape) -> np.ndarray:
    # An odd canvas dimension loses one row/column in the pipeline; pad it back.
    dh = shape[0] - spectrum.shape[0]; dw = shape[1] - spectrum.shape[1]
    if dh == 0 and dw == 0: return spectrum
    if dh < 0 or dw < 0: raise ValueError(f"Spectrum {spectrum.shape} larger than canvas {shape}")
    return cv2.copyMakeBorder(spectrum, 0, dh, 0, dw, cv2.BORDER_CONSTANT, value=0.0)


def compose(canvas: np.ndarray, spectrum: np.ndarray, control_armed: bool) -> tuple[np.ndarray, Rect]:
    """Returns the assembled frame and the erase control's rectangle.

    Neither input is modified.
    """
    org = (con_dict["label_origin_x"], con_dict["label_origin_y"])

    canvas_copy = np.array(canvas, dtype=np.float32, copy=True)
    put_halo_text(canvas_copy, con_dict["canvas_label"], org, con_dict["canvas_halo"], con_dict["canvas_halo_thickness"], 0.0)

    spectrum_copy = _fit_width(np.array(spectrum, dtype=np.float32, copy=True), canvas_copy.shape)
    put_halo_text(spectrum_copy, con_dict["spectrum_label"], org, con_dict["spectrum_halo"], con_dict["spectrum_halo_thickness"], 1.0)

    both_img = cv2.vconcat([canvas_copy, spectrum_copy])
    rows, cols = both_img.shape

    bar_height = con_dict["control_bar_height"]; margin = con_dict["control_margin"]
    button = Rect(margin, rows + margin, cols // 2 - 2 * margin, con_dict["control_height"])

    frame = np.ones((rows + bar_height, cols), dtype=np.float32)
    frame[:rows, :] = both_img

    if control_armed:
        shade = con_dict["control_armed_shade"]; halo = con_dict["control_armed_halo"]
    else:
        shade = con_dict["control_idle_shade"]; halo = con_dict["control_idle_halo"]
    region = np.full((button.height, button.width), shade, dtype=np.float32)
    text_org = (int(button.width * 0.35), int(button.height * 0.7))
    put_halo_text(region, con_dict["control_label"], text_org, halo, 2, 0.0)
    frame[button.y:button.y + button.height, button.x:button.x + button.width] = region

    return frame, button
