"""Data models and constants for the image-to-hex converter."""

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

# AIDEV-NOTE: Channel values are 8-bit, so the level count must fit in a u8
# and leave a non-zero block size (255 // levels).
MAX_CHANNEL_VALUE = 255
MIN_LEVELS = 1
MAX_LEVELS = 255

DEFAULT_LEVELS = 3  # Discrete values per channel
DEFAULT_PREVIEW_PATH = "preview.png"
DEFAULT_HEX_PATH = "image.hex"

BYTE_ORDERS = ("big", "little")

# Configuration file path
CONFIG_FILE = Path.home() / ".image_converter_config.json"


@dataclass
class ConverterConfig:
    """Settings for a single image conversion."""

    # Target dimensions in pixels
    resize_width: int = 64
    resize_height: int = 64

    # Channel quantization
    levels: int = DEFAULT_LEVELS  # 1-255

    # Output locations
    preview_path: str = DEFAULT_PREVIEW_PATH
    hex_path: str = DEFAULT_HEX_PATH

    # "big" emits the most significant retained byte first, "little" the
    # least significant (the order older dumps were written in)
    byte_order: str = "big"


@dataclass
class ConversionResult:
    """Summary of a completed conversion run."""

    source_path: str

    # Source and output dimensions (pixels)
    original_width: int
    original_height: int
    width: int
    height: int

    # Quantization and packing parameters
    levels: int
    block_size: int
    bus_bits: int
    pixel_data_bytes: int

    # Outputs
    hex_path: str
    preview_path: str
    preview_saved: bool = False

    # Statistics
    pixel_count: int = 0
    bytes_written: int = 0

    # Expanded-mode grid the preview file was written from
    preview_grid: np.ndarray | None = field(default=None, repr=False, compare=False)
