# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def _check_pixels(pixels: np.ndarray) -> None:
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) pixel buffer, got shape {pixels.shape}")


def write_ppm(path: str, pixels: np.ndarray) -> None:
    """
    Write a plain-text (P3) PPM, top row first, one ``r g b`` triple per line.
    """
    _check_pixels(pixels)
    height, width, _ = pixels.shape
    with open(path, "w", encoding="ascii", newline="\n") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            f.writelines(f"{r} {g} {b}\n" for r, g, b in row.tolist())


def save_png(path: str, pixels: np.ndarray) -> None:
    """Save as 8-bit RGB using Pillow."""
    _check_pixels(pixels)
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)


def save_image(path: str, pixels: np.ndarray) -> None:
    """Save ``pixels`` to ``path``; the extension picks the format."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".ppm":
        write_ppm(path, pixels)
    else:
        save_png(path, pixels)
    logger.info("Wrote %s", path)
