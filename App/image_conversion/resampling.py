"""Nearest-neighbor resampling of RGB pixel grids.

AIDEV-NOTE: Coordinates are computed in 32-bit floats and truncated so that
the sampled source pixels match dumps produced by earlier versions of the
tool. Do not switch to float64 or round-to-nearest here.
"""

import numpy as np


def nearest_indices(old_size: int, new_size: int) -> np.ndarray:
    """Source index for every target index along one axis.

    Args:
        old_size: Source length along the axis
        new_size: Target length along the axis (> 0)

    Returns:
        int64 array of length new_size. Entries may be >= old_size when
        float error pushes the last sample past the edge.
    """
    ratio = np.float32(old_size) / np.float32(new_size)
    positions = np.arange(new_size, dtype=np.float32) * ratio
    return positions.astype(np.int64)  # truncation toward zero


def resize_nearest(
    grid: np.ndarray, new_dimensions: "tuple[int, int]"
) -> np.ndarray:
    """Resize an image grid using nearest-neighbor sampling.

    Args:
        grid: Source grid, shape (height, width, 3), dtype uint8
        new_dimensions: Target (width, height) in pixels

    Returns:
        New grid of shape (new_height, new_width, 3). Target pixels whose
        source coordinate lies outside the source grid stay black.

    Raises:
        ValueError: If a target dimension is negative
    """
    new_width, new_height = new_dimensions
    if new_width < 0 or new_height < 0:
        raise ValueError(
            f"Target dimensions must be non-negative, got {new_width}x{new_height}"
        )

    old_height, old_width = grid.shape[:2]
    resized = np.zeros((new_height, new_width, 3), dtype=np.uint8)

    if new_width == 0 or new_height == 0:
        return resized

    xs = nearest_indices(old_width, new_width)
    ys = nearest_indices(old_height, new_height)

    valid_x = np.nonzero(xs < old_width)[0]
    valid_y = np.nonzero(ys < old_height)[0]
    if valid_x.size == 0 or valid_y.size == 0:
        return resized

    resized[np.ix_(valid_y, valid_x)] = grid[np.ix_(ys[valid_y], xs[valid_x])]
    return resized
