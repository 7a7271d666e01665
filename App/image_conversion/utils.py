"""Helpers for moving pixel data between Pillow images and numpy grids.

AIDEV-NOTE: The pipeline works on numpy grids of shape (height, width, 3)
and dtype uint8. Pillow is only touched at the edges, for decoding the
source and encoding the preview.
"""

from pathlib import Path

import numpy as np
from PIL import Image


def load_rgb_image(file_path: "str | Path") -> Image.Image:
    """Open an image file and convert it to RGB (alpha is dropped).

    Raises:
        ValueError: If the file is missing, unreadable or not an image
    """
    try:
        with Image.open(file_path) as image:
            return image.convert("RGB")
    except Exception as e:
        raise ValueError(f"Failed to load image: {e}") from e


def image_to_grid(image: Image.Image) -> np.ndarray:
    """Convert a Pillow image to an RGB uint8 grid."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.array(image, dtype=np.uint8).reshape(image.height, image.width, 3)


def grid_to_image(grid: np.ndarray) -> Image.Image:
    """Convert an RGB uint8 grid back to a Pillow image."""
    return Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))


def save_grid(grid: np.ndarray, file_path: "str | Path") -> None:
    """Save a grid as an image; the format follows the file extension.

    Raises:
        OSError: If the file cannot be written
        ValueError: If the extension does not name a known format, or the
            grid is empty
    """
    height, width = grid.shape[:2]
    if width == 0 or height == 0:
        raise ValueError("Cannot save an empty image")
    grid_to_image(grid).save(file_path)
