"""
Magnitude spectrum pipeline.

Turns a real-valued raster into the centered, log-scaled, normalized
magnitude of its 2-D DFT, ready for display. The scale is frame-relative:
min/max are recomputed on every call, so two spectra are not numerically
comparable to each other.
"""
import logging

import numpy as np
import cv2

logger = logging.getLogger(__name__)


def optimal_size(n: int) -> int:
    """Smallest size >= n that the DFT handles efficiently (2^a 3^b 5^c)."""
    return cv2.getOptimalDFTSize(int(n))


def crop_to_even(img: np.ndarray) -> np.ndarray:
    h, w = img.shape[:2]
    return img[:h & -2, :w & -2]


def swap_quadrants(img: np.ndarray) -> np.ndarray:
    """Moves the zero-frequency term from the corner to the center.

    Swaps top-left with bottom-right and top-right with bottom-left. Both
    dimensions must be even; applying it twice gives back the input.
    """
    h, w = img.shape[:2]
    if h % 2 or w % 2:
        raise ValueError(f"Quadrant swap needs even dimensions, got {w}x{h}")
    cy, cx = h // 2, w // 2
    out = np.empty_like(img)
    out[:cy, :cx] = img[cy:, cx:]
    out[cy:, cx:] = img[:cy, :cx]
    out[:cy, cx:] = img[cy:, :cx]
    out[cy:, :cx] = img[:cy, cx:]
    return out


def normalize_min_max(img: np.ndarray) -> np.ndarray:
    # Flat input has no range to stretch: all zeros.
    min_val = float(np.min(img)); max_val = float(np.max(img))
    range_val = max_val - min_val
    if range_val <= 0.0:
        return np.zeros(img.shape, dtype=np.float32)
    return ((img - min_val) / range_val).astype(np.float32)


def compute_spectrum(raster: np.ndarray) -> np.ndarray:
    """Centered log-magnitude spectrum of ``raster`` normalized to [0, 1].

    Odd dimensions are cropped by one row/column before centering, so the
    result may be one pixel smaller than the input along either axis. The
    input is never modified.
    """
    f_transform = np.fft.fft2(raster.astype(np.float64))
    magnitude = np.abs(f_transform)
    log_mag = np.log1p(magnitude)
    log_mag = crop_to_even(log_mag)
    centered = swap_quadrants(log_mag)
    logger.debug("Spectrum computed for %dx%d raster", raster.shape[1], raster.shape[0])
    return normalize_min_max(centered)
