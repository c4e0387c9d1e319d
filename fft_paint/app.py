# -*- coding: utf-8 -*-
import sys
import argparse
import logging

import numpy as np
from PyQt5.QtWidgets import QApplication, QWidget
from PyQt5.QtGui import QImage, QPainter
from PyQt5.QtCore import Qt

from . import config
from .canvas import Canvas
from .interaction import PaintSession
from .loader import ImageLoadError, load_grayscale

logger = logging.getLogger(__name__)


# --- Helper Function for Display Conversion ---
def frame_to_qimage(frame: np.ndarray) -> QImage | None:
    if frame is None: return None
    if frame.ndim != 2: return None
    height, width = frame.shape
    gray = np.ascontiguousarray(np.clip(frame * 255.0 + 0.5, 0, 255).astype(np.uint8))
    qimg = QImage(gray.data, width, height, width, QImage.Format_Grayscale8)
    return qimg.copy()
# ----------------------------------------------


class PaintWindow(QWidget):
    """Shows session frames 1:1 and forwards the mouse to the session."""

    def __init__(self, session: PaintSession, parent=None):
        super().__init__(parent)
        self.session = session; self.display_image = None
        self.setWindowTitle(config.con_dict["window_title"])
        self.setMouseTracking(True); self.setCursor(Qt.CrossCursor)
        self.show_frame(session.render())

    def show_frame(self, frame: np.ndarray):
        self.display_image = frame_to_qimage(frame)
        if self.display_image is not None: self.setFixedSize(self.display_image.width(), self.display_image.height())
        self.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton: self.show_frame(self.session.pointer_down(event.x(), event.y()))

    def mouseMoveEvent(self, event):
        self.show_frame(self.session.pointer_move(event.x(), event.y()))

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton: self.show_frame(self.session.pointer_up(event.x(), event.y()))

    def keyPressEvent(self, event):
        text = event.text()
        if text and ord(text[0]) == config.con_dict["quit_key"]:
            logger.info("Quit key pressed"); self.close()
        else: super().keyPressEvent(event)

    def paintEvent(self, event):
        super().paintEvent(event)
        if self.display_image is not None and not self.display_image.isNull():
            painter = QPainter(self); painter.drawImage(0, 0, self.display_image); painter.end()


def positive_int(value: str) -> int:
    try: n = int(value)
    except ValueError: raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n <= 0: raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="fft-paint", description="Draw on a canvas and watch its Fourier magnitude update live.")
    parser.add_argument("--image", help="Starting image: file path or http(s) URL")
    parser.add_argument("--width", type=positive_int, default=config.con_dict["canvas_width"], help="Logical canvas width for a blank start")
    parser.add_argument("--height", type=positive_int, default=config.con_dict["canvas_height"], help="Logical canvas height for a blank start")
    parser.add_argument("--thickness", type=positive_int, default=config.con_dict["stroke_thickness"], help="Stroke thickness in pixels")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_canvas(args) -> Canvas:
    """Blank canvas, or one padded around ``--image``. Raises ImageLoadError."""
    if args.image:
        return Canvas.from_raster(load_grayscale(args.image))
    return Canvas.create(args.width, args.height)


def apply_overrides(args):
    config.set_value("canvas_width", args.width); config.set_value("canvas_height", args.height)
    config.set_value("stroke_thickness", args.thickness)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    apply_overrides(args)
    try:
        canvas = build_canvas(args)
    except ImageLoadError as e:
        logger.error("Error opening the image file: %s", e)
        return 1
    app = QApplication(sys.argv[:1])
    window = PaintWindow(PaintSession(canvas))
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
