import math

import numpy as np
import pytest

from image_conversion.quantization import (
    block_size,
    build_lookup_table,
    quantize_channel,
    quantize_grid,
    quantize_pixel,
    round_to_nearest,
)


def test_block_size():
    assert block_size(1) == 255
    assert block_size(3) == 85
    assert block_size(15) == 17
    assert block_size(255) == 1


@pytest.mark.parametrize("levels", [0, -1, 256])
def test_invalid_level_count(levels):
    with pytest.raises(ValueError):
        block_size(levels)
    with pytest.raises(ValueError):
        quantize_channel(100, levels)


def test_documented_pixel():
    assert quantize_pixel((70, 158, 237), 3) == (85, 170, 255)
    assert quantize_pixel((70, 158, 237), 3, bus_mode=True) == (1, 2, 3)


def test_ties_round_up():
    # levels=127 -> block 2, so odd values sit exactly between two multiples
    assert round_to_nearest(1, 2) == 2
    assert round_to_nearest(3, 2) == 4
    assert quantize_channel(1, 127, bus_mode=True) == 1


def test_overflow_clamps_to_max():
    # 255 / 2 = 127.5 -> 128 * 2 = 256, which must clamp instead of wrapping
    assert quantize_channel(255, 127) == 255
    assert quantize_channel(255, 127, bus_mode=True) == 127


def test_block_that_does_not_divide_255():
    # levels=2 -> block 127; 255 rounds down to 2 * 127
    assert quantize_channel(255, 2) == 254
    assert quantize_channel(63, 2) == 0
    assert quantize_channel(64, 2) == 127
    assert quantize_channel(255, 2, bus_mode=True) == 2


def test_expanded_values_are_clamped_multiples():
    for levels in range(1, 86):
        block = block_size(levels)
        for value in range(256):
            expanded = quantize_channel(value, levels)
            assert expanded <= 255
            if expanded != 255:
                assert expanded % block == 0


def test_expanded_quantization_is_idempotent():
    for levels in range(1, 256):
        for value in range(256):
            once = quantize_channel(value, levels)
            assert quantize_channel(once, levels) == once


def test_expanded_matches_index_times_block_without_clamping():
    for levels in range(1, 256):
        block = block_size(levels)
        for value in range(256):
            if math.floor(value / block + 0.5) * block > 255:
                continue
            expanded = quantize_channel(value, levels)
            index = quantize_channel(value, levels, bus_mode=True)
            assert expanded == index * block


def test_bus_index_range():
    for levels in range(1, 256):
        top = max(quantize_channel(v, levels, bus_mode=True) for v in range(256))
        assert top == 255 // block_size(levels)

    # When block_size divides 255 evenly the top index is exactly levels
    for levels in (1, 3, 5, 15, 17, 51, 85, 255):
        assert quantize_channel(255, levels, bus_mode=True) == levels


def test_lookup_table_matches_channel_function():
    table = build_lookup_table(5, bus_mode=True)
    assert table.dtype == np.uint8
    assert table.shape == (256,)
    assert [int(v) for v in table] == [
        quantize_channel(v, 5, bus_mode=True) for v in range(256)
    ]


def test_quantize_grid_matches_pixels(gradient_grid):
    original = gradient_grid.copy()
    for bus_mode in (False, True):
        result = quantize_grid(gradient_grid, 3, bus_mode)
        assert result.shape == gradient_grid.shape
        assert result.dtype == np.uint8
        for y in range(gradient_grid.shape[0]):
            for x in range(gradient_grid.shape[1]):
                pixel = tuple(int(c) for c in gradient_grid[y, x])
                assert tuple(int(c) for c in result[y, x]) == quantize_pixel(
                    pixel, 3, bus_mode
                )
    np.testing.assert_array_equal(gradient_grid, original)
