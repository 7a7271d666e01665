"""Per-channel color quantization to a fixed number of levels.

AIDEV-NOTE: Each channel is snapped to the nearest multiple of
block_size = 255 // levels. In bus mode the multiple's index is returned
instead of the value itself. Because the top value is clamped to 255, indices
span 0..levels inclusive, which is why packing sizes the bus for levels + 1.

    levels = 3, input = (70, 158, 237)
    expanded -> (85, 170, 255)
    bus      -> (1, 2, 3)
"""

import math

import numpy as np

from models import MAX_CHANNEL_VALUE, MAX_LEVELS, MIN_LEVELS


def validate_levels(levels: int) -> int:
    """Check a quantization level count and return it.

    Raises:
        ValueError: If levels is outside 1-255
    """
    if not MIN_LEVELS <= levels <= MAX_LEVELS:
        raise ValueError(
            f"Level count must be between {MIN_LEVELS} and {MAX_LEVELS}, got {levels}"
        )
    return levels


def block_size(levels: int) -> int:
    """Spacing between adjacent expanded channel values."""
    return MAX_CHANNEL_VALUE // validate_levels(levels)


def round_to_nearest(value: int, to_nearest: int) -> int:
    """Round value to the nearest multiple of to_nearest, clamped to 255.

    Ties round up. The multiple count saturates at 255 before the
    multiplication, and a product above 255 clamps to 255 rather than
    wrapping.
    """
    multiples = min(math.floor(value / to_nearest + 0.5), MAX_CHANNEL_VALUE)
    rounded = multiples * to_nearest
    if rounded > MAX_CHANNEL_VALUE:
        return MAX_CHANNEL_VALUE
    return rounded


def quantize_channel(value: int, levels: int, bus_mode: bool = False) -> int:
    """Quantize a single 8-bit channel value.

    Args:
        value: Channel value (0-255)
        levels: Number of discrete levels per channel (1-255)
        bus_mode: Return the level index instead of the expanded value

    Returns:
        Expanded value in 0-255, or level index in 0-levels in bus mode
    """
    block = block_size(levels)
    rounded = round_to_nearest(value, block)

    if bus_mode:
        return rounded // block
    return rounded


def quantize_pixel(
    pixel: "tuple[int, int, int]", levels: int, bus_mode: bool = False
) -> "tuple[int, int, int]":
    """Quantize each channel of an RGB pixel independently."""
    r, g, b = pixel
    return (
        quantize_channel(r, levels, bus_mode),
        quantize_channel(g, levels, bus_mode),
        quantize_channel(b, levels, bus_mode),
    )


def build_lookup_table(levels: int, bus_mode: bool = False) -> np.ndarray:
    """Precompute quantize_channel for every possible channel value."""
    return np.array(
        [quantize_channel(v, levels, bus_mode) for v in range(MAX_CHANNEL_VALUE + 1)],
        dtype=np.uint8,
    )


def quantize_grid(
    grid: np.ndarray, levels: int, bus_mode: bool = False
) -> np.ndarray:
    """Quantize every channel of an image grid.

    Args:
        grid: Image grid, shape (height, width, 3), dtype uint8
        levels: Number of discrete levels per channel (1-255)
        bus_mode: Produce level indices instead of expanded values

    Returns:
        New uint8 grid of the same shape; the input is left untouched
    """
    lookup = build_lookup_table(levels, bus_mode)
    return lookup[grid]
