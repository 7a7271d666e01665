"""Bit-packing and hex serialization of quantized pixels.

AIDEV-NOTE: This module produces the memory-initialization text consumed by
the hardware. Each pixel's bus indices are packed into one word with red in
the most significant field and blue in the least significant:

    word = red << (2 * bus_bits) | green << bus_bits | blue

Only the low pixel_data_bytes of the 32-bit word are written, each as two
lowercase hex digits and a trailing space. Pixels follow each other with no
separator, so the reader must know pixel_data_bytes to split the stream.

    levels = 3 -> bus_bits = 2, pixel_data_bytes = 1
    bus pixel (1, 2, 3) -> 0b01_10_11 -> "1b "
"""

import math
from pathlib import Path
from typing import Iterator

import numpy as np

from models import BYTE_ORDERS

from .quantization import block_size, validate_levels

WORD_MASK = 0xFFFFFFFF


def bus_width(levels: int) -> int:
    """Number of bits per channel field, floor(log2(levels + 1)).

    AIDEV-NOTE: Bus indices span 0..levels, so levels + 1 values must be
    represented. The floor matches the dumps already in use; when levels + 1
    is not a power of two the top index is one bit wider than its field and
    spills into the neighbouring channel. Kept for compatibility.
    """
    validate_levels(levels)
    # Exact integer form of int(log2(levels + 1))
    return (levels + 1).bit_length() - 1


def pixel_data_bytes(levels: int) -> int:
    """Whole bytes needed to hold three channel fields."""
    return math.ceil(bus_width(levels) * 3 / 8)


def pack_words(grid: np.ndarray, bus_bits: int) -> np.ndarray:
    """Pack every pixel of a bus-mode grid into a 32-bit word.

    Args:
        grid: Bus-mode grid, shape (height, width, 3)
        bus_bits: Width of each channel field

    Returns:
        uint32 array of shape (height, width)
    """
    channels = grid.astype(np.uint32)
    return (
        (channels[..., 0] << np.uint32(bus_bits * 2))
        | (channels[..., 1] << np.uint32(bus_bits))
        | channels[..., 2]
    )


def words_to_bytes(
    words: np.ndarray, data_bytes: int, byte_order: str = "big"
) -> np.ndarray:
    """Keep the low data_bytes bytes of each packed word.

    Args:
        words: uint32 array of packed words, any shape
        data_bytes: Number of bytes to keep per word (1-4)
        byte_order: "big" for most significant retained byte first,
            "little" for least significant first

    Returns:
        uint8 array of shape words.shape + (data_bytes,)
    """
    if byte_order == "big":
        shifts = np.arange(data_bytes - 1, -1, -1, dtype=np.uint32) * np.uint32(8)
    elif byte_order == "little":
        shifts = np.arange(data_bytes, dtype=np.uint32) * np.uint32(8)
    else:
        raise ValueError(
            f"Unknown byte order: {byte_order!r} (expected one of {BYTE_ORDERS})"
        )
    words = np.asarray(words, dtype=np.uint32)
    return ((words[..., np.newaxis] >> shifts) & np.uint32(0xFF)).astype(np.uint8)


def pack_pixel(red: int, green: int, blue: int, bus_bits: int) -> int:
    """Pack three bus indices into a 32-bit word, red most significant."""
    pixel = np.array([[[red, green, blue]]], dtype=np.uint32)
    return int(pack_words(pixel, bus_bits)[0, 0]) & WORD_MASK


def pixel_to_bytes(word: int, data_bytes: int, byte_order: str = "big") -> bytes:
    """Serialize the low data_bytes bytes of a single packed word."""
    words = np.array([word & WORD_MASK], dtype=np.uint32)
    return words_to_bytes(words, data_bytes, byte_order)[0].tobytes()


def format_hex_bytes(data: bytes) -> str:
    """Format bytes as space-terminated two-digit lowercase hex octets."""
    if not data:
        return ""
    return data.hex(" ") + " "


def iter_row_bytes(
    grid: np.ndarray, levels: int, byte_order: str = "big"
) -> Iterator[bytes]:
    """Yield the serialized bytes of each grid row, top to bottom.

    Pixels within a row are packed left to right with no separator, so the
    concatenation of all rows is the row-major pixel stream.

    Args:
        grid: Bus-mode grid, shape (height, width, 3)
        levels: Quantization level count the grid was produced with
        byte_order: "big" or "little"
    """
    bits = bus_width(levels)
    data_bytes = pixel_data_bytes(levels)

    data = words_to_bytes(pack_words(grid, bits), data_bytes, byte_order)
    for row in data:
        yield row.tobytes()


def format_hex_dump(grid: np.ndarray, levels: int, byte_order: str = "big") -> str:
    """Build the complete hex dump text for a bus-mode grid in memory."""
    return "".join(
        format_hex_bytes(data) for data in iter_row_bytes(grid, levels, byte_order)
    )


def write_hex_dump(
    grid: np.ndarray,
    levels: int,
    output_path: "str | Path",
    byte_order: str = "big",
) -> int:
    """Write the hex dump of a bus-mode grid to a text file.

    Args:
        grid: Bus-mode grid, shape (height, width, 3)
        levels: Quantization level count the grid was produced with
        output_path: Destination file, created or truncated
        byte_order: "big" or "little"

    Returns:
        Number of bytes written to the dump

    Raises:
        OSError: If the file cannot be opened or written. A partial file
            may remain.
    """
    bytes_written = 0
    with open(output_path, "w") as output:
        for data in iter_row_bytes(grid, levels, byte_order):
            output.write(format_hex_bytes(data))
            bytes_written += len(data)
    return bytes_written


def unpack_pixel(word: int, bus_bits: int) -> "tuple[int, int, int]":
    """Split a packed word back into (red, green, blue) fields.

    Red takes every bit above the green field, so an oversized red index
    survives; oversized green or blue indices cannot be told apart from
    their neighbours.
    """
    mask = (1 << bus_bits) - 1
    return (
        (word >> (bus_bits * 2)) & 0xFF,
        (word >> bus_bits) & mask,
        word & mask,
    )


def read_hex_dump(
    text: str,
    levels: int,
    width: int,
    height: int,
    byte_order: str = "big",
) -> np.ndarray:
    """Parse hex dump text back into a bus-mode grid.

    Args:
        text: Dump contents (whitespace-separated hex octets)
        levels: Quantization level count used to write the dump
        width: Image width in pixels
        height: Image height in pixels
        byte_order: Byte order used to write the dump

    Returns:
        uint8 grid of shape (height, width, 3)

    Raises:
        ValueError: If a token is not a hex octet or the byte count does
            not match width * height * pixel_data_bytes
    """
    bits = bus_width(levels)
    data_bytes = pixel_data_bytes(levels)

    try:
        values = bytes(int(token, 16) for token in text.split())
    except ValueError as e:
        raise ValueError(f"Invalid hex dump: {e}") from e

    expected = width * height * data_bytes
    if len(values) != expected:
        raise ValueError(
            f"Hex dump holds {len(values)} bytes, expected {expected} "
            f"for {width}x{height} pixels at {data_bytes} bytes each"
        )

    grid = np.zeros((height, width, 3), dtype=np.uint8)
    for index in range(width * height):
        chunk = values[index * data_bytes : (index + 1) * data_bytes]
        word = int.from_bytes(chunk, byte_order)
        grid[index // width, index % width] = unpack_pixel(word, bits)
    return grid


def expand_bus_grid(grid: np.ndarray, levels: int) -> np.ndarray:
    """Map bus indices back to evenly spaced channel values."""
    block = block_size(levels)
    expanded = np.minimum(grid.astype(np.uint16) * block, 255)
    return expanded.astype(np.uint8)
