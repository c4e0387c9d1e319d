"""Loads the optional starting image from a file path or an http(s) URL."""
import logging

import numpy as np
import cv2
import requests

from .config import con_dict

logger = logging.getLogger(__name__)


class ImageLoadError(ValueError):
    """The initial image could not be read or decoded."""


def _read_url(url: str) -> np.ndarray | None:
    try:
        logger.info("Requesting image URL: %s", url)
        response = requests.get(url, timeout=con_dict["request_timeout"]); response.raise_for_status()
    except requests.exceptions.Timeout as e: raise ImageLoadError(f"Timeout loading image: {url}") from e
    except requests.exceptions.RequestException as e: raise ImageLoadError(f"Network error: {e}") from e
    img_array = np.frombuffer(response.content, np.uint8)
    if img_array.size == 0: return None
    return cv2.imdecode(img_array, cv2.IMREAD_GRAYSCALE)


def _read_file(path: str) -> np.ndarray | None:
    img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if img is None:
        # cv2.imread chokes on some non-ASCII paths; decode from bytes instead
        try: data = np.fromfile(path, dtype=np.uint8)
        except OSError as e: raise ImageLoadError(f"Failed to read: {path} ({e})") from e
        if data.size == 0: return None
        img = cv2.imdecode(data, cv2.IMREAD_GRAYSCALE)
    return img


def load_grayscale(source: str) -> np.ndarray:
    """Returns the image at ``source`` as float32 min/max normalized to [0, 1].

    A flat image (every pixel the same, e.g. all white) has no range to
    stretch and comes back as all zeros, i.e. solid ink.
    """
    if source.startswith(("http://", "https://")): img = _read_url(source)
    else: img = _read_file(source)
    if img is None: raise ImageLoadError(f"Failed to load/decode: {source}")
    img = img.astype(np.float32)
    return cv2.normalize(img, None, 0.0, 1.0, cv2.NORM_MINMAX)
