"""
Global configuration dictionary and default parameters used across fft-paint.

Stores canvas geometry, brush settings, label text and shades for the
composited frame, and driver behaviour flags. Core functions read their
defaults from here at call time, so overrides written by the CLI take effect
everywhere.
"""

con_dict = {
    # logical drawing area (padded to transform-optimal sizes)
    "canvas_width": 900,
    "canvas_height": 400,

    # raster values: 0 = ink, 1 = blank
    "background": 1.0,
    "ink": 0.0,

    # brush
    "stroke_thickness": 2,
    "dot_radius": 1,

    # labels
    "canvas_label": "Draw here (pencil):",
    "spectrum_label": "Fourier magnitude:",
    "label_origin_x": 20,
    "label_origin_y": 30,
    "font_scale": 0.7,
    "canvas_halo": 0.9,
    "canvas_halo_thickness": 2,
    "spectrum_halo": 0.3,
    "spectrum_halo_thickness": 3,

    # erase control
    "control_label": "Start over",
    "control_bar_height": 50,
    "control_margin": 2,
    "control_height": 46,
    "control_idle_shade": 0.8,
    "control_armed_shade": 0.6,
    "control_idle_halo": 0.7,
    "control_armed_halo": 0.5,

    # driver
    "window_title": "CV_Window_",
    "quit_key": 113,
    "request_timeout": 20,
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    con_dict[key] = ty(value)


def get_value(key):
    return con_dict[key]


def get_all():
    return con_dict
