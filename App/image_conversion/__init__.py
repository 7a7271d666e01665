"""Image conversion pipeline for image-to-hex memory dumps.

AIDEV-NOTE: This package handles the complete pipeline from an image file
to a packed hex dump. Organized into modular components:
- converter: Main ImageConverter orchestrator
- resampling: Nearest-neighbor resizing
- quantization: Per-channel level quantization (expanded and bus modes)
- packing: Bus width, bit-packing and hex serialization
- utils: Pillow <-> numpy grid conversion and image I/O
"""

from .converter import ImageConverter
from .packing import format_hex_dump, read_hex_dump, write_hex_dump

__all__ = ["ImageConverter", "format_hex_dump", "read_hex_dump", "write_hex_dump"]
