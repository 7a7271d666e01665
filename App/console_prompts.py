"""Console front end: prompt for parameters and run a single conversion."""

import sys
from typing import Callable

from config_manager import ConfigManager
from image_conversion import ImageConverter
from models import ConverterConfig


def read_string(message: str, input_fn: Callable[[], str] = input) -> str:
    """Print a prompt and return the next line of user input."""
    print(message)
    return input_fn()


def parse_dimension(text: str) -> int:
    """Parse a non-negative pixel dimension.

    Raises:
        ValueError: If the text is not a non-negative integer
    """
    try:
        value = int(text.strip())
    except ValueError as e:
        raise ValueError("Please input a number") from e
    if value < 0:
        raise ValueError("Please input a number")
    return value


def prompt_parameters(
    input_fn: Callable[[], str] = input,
) -> "tuple[int, int, str]":
    """Ask for resize width, resize height and input file name, in that order.

    Returns:
        Tuple of (width, height, file_name)

    Raises:
        ValueError: If a dimension is not a number
    """
    width = parse_dimension(read_string("Image resize width:", input_fn))
    height = parse_dimension(read_string("Image resize height:", input_fn))
    file_name = read_string("Input file name:", input_fn).strip()
    return width, height, file_name


def run(
    config: ConverterConfig, input_fn: Callable[[], str] = input
) -> int:
    """Prompt for parameters and convert one image.

    Returns:
        Process exit status (0 on success)
    """
    try:
        width, height, file_name = prompt_parameters(input_fn)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    converter = ImageConverter(config)
    try:
        result = converter.convert(file_name, width, height)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error writing {config.hex_path}: {e}")
        return 1

    print(
        f"✓ {result.pixel_count} pixels, {result.bus_bits}-bit channels, "
        f"{result.bytes_written} bytes in {result.hex_path}"
    )
    return 0


def main():
    """Run the interactive console converter."""
    config = ConfigManager().load()
    sys.exit(run(config))


if __name__ == "__main__":
    main()
