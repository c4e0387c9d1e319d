import numpy as np
import pytest

from fft_paint import config
from fft_paint.canvas import Canvas
from fft_paint.spectrum import optimal_size


def test_create_pads_to_optimal_size():
    c = Canvas.create(901, 397)
    assert (c.width, c.height) == (optimal_size(901), optimal_size(397))
    assert c.width >= 901 and c.height >= 397
    assert c.raster.dtype == np.float32
    assert np.all(c.raster == 1.0)

def test_from_raster_pads_with_background():
    src = np.zeros((97, 121), dtype=np.float32)
    c = Canvas.from_raster(src)
    assert (c.width, c.height) == (optimal_size(121), optimal_size(97))
    assert np.all(c.raster[:97, :121] == 0.0)
    assert np.all(c.raster[97:, :] == 1.0)
    assert np.all(c.raster[:, 121:] == 1.0)

def test_from_raster_rejects_color():
    with pytest.raises(ValueError):
        Canvas.from_raster(np.zeros((10, 10, 3)))

def test_raster_is_read_only(canvas):
    with pytest.raises(ValueError):
        canvas.raster[0, 0] = 0.0

def test_stroke_segment_inks_pixels(canvas):
    canvas.stroke_segment((10, 10), (20, 10))
    r = canvas.raster
    assert np.all(r[10, 10:21] == 0.0)
    assert r[200, 200] == 1.0

def test_stroke_thickness_from_config(canvas):
    config.set_value("stroke_thickness", 9)
    canvas.stroke_segment((100, 100), (200, 100))
    assert canvas.raster[104, 150] == 0.0

def test_stamp_point(canvas):
    canvas.stamp_point((50, 60))
    assert canvas.raster[60, 50] == 0.0
    assert canvas.raster[60, 55] == 1.0

def test_out_of_bounds_is_clipped(canvas):
    canvas.stamp_point((-50, -50))
    canvas.stamp_point((5000, 5000))
    canvas.stroke_segment((-100, 5), (5, 5))
    assert canvas.raster.shape == (400, 900)
    assert canvas.raster[5, 0] == 0.0

def test_reset_is_idempotent(canvas):
    canvas.stroke_segment((0, 0), (300, 300))
    canvas.reset_to_blank()
    once = canvas.snapshot()
    canvas.reset_to_blank()
    assert np.array_equal(once, canvas.snapshot())
    assert np.all(once == 1.0)

def test_snapshot_is_independent(canvas):
    snap = canvas.snapshot()
    canvas.stamp_point((10, 10))
    assert snap[10, 10] == 1.0
