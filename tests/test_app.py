import argparse

import pytest

from fft_paint import app, config


def test_missing_image_exits_before_window(tmp_path, monkeypatch):
    def no_qt(*args, **kwargs): raise AssertionError("QApplication must not be created")
    monkeypatch.setattr(app, "QApplication", no_qt)
    assert app.main(["--image", str(tmp_path / "nope.png")]) == 1

def test_parse_args_defaults():
    args = app.parse_args([])
    assert (args.width, args.height, args.thickness) == (900, 400, 2)
    assert args.image is None

def test_overrides_written_to_config():
    app.apply_overrides(app.parse_args(["--width", "640", "--height", "360", "--thickness", "5"]))
    assert config.get_value("canvas_width") == 640
    assert config.get_value("canvas_height") == 360
    assert config.get_value("stroke_thickness") == 5

@pytest.mark.parametrize("flag, value", [("--width", "0"), ("--height", "-4"), ("--thickness", "x")])
def test_rejects_non_positive_sizes(flag, value):
    with pytest.raises(SystemExit):
        app.parse_args([flag, value])

def test_positive_int():
    assert app.positive_int("7") == 7
    with pytest.raises(argparse.ArgumentTypeError):
        app.positive_int("-1")

def test_build_canvas_blank():
    canvas = app.build_canvas(app.parse_args(["--width", "120", "--height", "97"]))
    assert (canvas.width, canvas.height) == (120, 100)
