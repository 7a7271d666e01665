import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def gradient_grid():
    """5x3 grid where every pixel is distinct."""
    grid = np.zeros((3, 5, 3), dtype=np.uint8)
    for y in range(3):
        for x in range(5):
            grid[y, x] = (x * 50, y * 100, (x + y) * 20)
    return grid


@pytest.fixture
def solid_png(tmp_path):
    """4x4 solid-color PNG on disk."""
    path = tmp_path / "solid.png"
    Image.new("RGB", (4, 4), (70, 158, 237)).save(path)
    return path
