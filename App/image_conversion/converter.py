"""Main image converter orchestrating the complete pipeline.

AIDEV-NOTE: The run is strictly sequential: decode, resize, quantize for
the preview, quantize for the bus, pack and write. Both quantized grids are
derived from the resized grid, never from each other. The preview is best
effort; the hex dump is the real artifact and its errors propagate.
"""

from dataclasses import replace
from pathlib import Path

import numpy as np

from models import ConversionResult, ConverterConfig

from .packing import bus_width, pixel_data_bytes, write_hex_dump
from .quantization import block_size, quantize_grid, validate_levels
from .resampling import resize_nearest
from .utils import image_to_grid, load_rgb_image, save_grid


class ImageConverter:
    """Converts images into quantized hex dumps for hardware memories."""

    def __init__(self, config: ConverterConfig | None = None):
        # Own copy, so later edits by the caller cannot change a run in progress
        self.config = replace(config) if config is not None else ConverterConfig()

    def load_image(self, file_path: str | Path) -> np.ndarray:
        """Load an image file as an RGB grid.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            uint8 grid of shape (height, width, 3)

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        return image_to_grid(load_rgb_image(file_path))

    def resize(self, grid: np.ndarray, width: int, height: int) -> np.ndarray:
        """Resize a grid to the target size using nearest-neighbor sampling."""
        return resize_nearest(grid, (width, height))

    def quantize(
        self, grid: np.ndarray, levels: int | None = None, bus_mode: bool = False
    ) -> np.ndarray:
        """Quantize every channel of a grid.

        Args:
            grid: Image grid to quantize
            levels: Levels per channel, uses config default if None
            bus_mode: Produce level indices instead of expanded values

        Returns:
            New quantized grid
        """
        levels = self.config.levels if levels is None else levels
        return quantize_grid(grid, levels, bus_mode)

    def save_preview(self, grid: np.ndarray, file_path: str | Path) -> bool:
        """Save the expanded preview, reporting rather than raising failures.

        Returns:
            True if the preview was written
        """
        try:
            save_grid(grid, file_path)
        except (OSError, ValueError) as e:
            print(f"Warning: Could not save preview to {file_path}: {e}")
            return False
        print(f"Saved preview to {file_path}.")
        return True

    def convert(
        self,
        file_path: str | Path,
        width: int | None = None,
        height: int | None = None,
    ) -> ConversionResult:
        """Execute the complete conversion pipeline.

        Args:
            file_path: Path to input image
            width: Target width in pixels, uses config default if None
            height: Target height in pixels, uses config default if None

        Returns:
            ConversionResult describing the written outputs

        Raises:
            ValueError: If the image cannot be decoded or the configuration
                is invalid
            OSError: If the hex dump cannot be written
        """
        config = self.config
        width = config.resize_width if width is None else width
        height = config.resize_height if height is None else height
        levels = validate_levels(config.levels)

        print("Starting image conversion pipeline...")

        print("Loading image...")
        image = self.load_image(file_path)
        orig_height, orig_width = image.shape[:2]
        print(f"Loaded image with size: {orig_width}x{orig_height} pixels.")

        print(f"Resizing image to {width}x{height} pixels...")
        resized = self.resize(image, width, height)
        del image

        print(f"Quantizing channels to {levels} levels...")
        preview = self.quantize(resized, levels, bus_mode=False)
        preview_saved = self.save_preview(preview, config.preview_path)

        bus_grid = self.quantize(resized, levels, bus_mode=True)

        bits = bus_width(levels)
        data_bytes = pixel_data_bytes(levels)
        print(
            f"Packing pixels with {bits}-bit channels "
            f"({data_bytes} byte(s) per pixel)..."
        )
        bytes_written = write_hex_dump(
            bus_grid, levels, config.hex_path, config.byte_order
        )
        print(f"Wrote {bytes_written} bytes to {config.hex_path}.")

        print("Image conversion complete.")

        return ConversionResult(
            source_path=str(file_path),
            original_width=orig_width,
            original_height=orig_height,
            width=width,
            height=height,
            levels=levels,
            block_size=block_size(levels),
            bus_bits=bits,
            pixel_data_bytes=data_bytes,
            hex_path=str(config.hex_path),
            preview_path=str(config.preview_path),
            preview_saved=preview_saved,
            pixel_count=width * height,
            bytes_written=bytes_written,
            preview_grid=preview,
        )
