"""Centralized styling constants for the image converter UI."""

from PyQt6.QtGui import QFont


class ThemeColors:
    """Application theme colors."""

    BORDER_DEFAULT = "gray"
    BACKGROUND_PANEL = "#2a2a2a"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100
    CONSOLE_MAX_LINES = 2000

    # Image preview
    PREVIEW_MIN_SIZE = (200, 150)
    PREVIEW_MAX_SIZE = (400, 300)

    # Target dimensions accepted by the size inputs
    MAX_DIMENSION = 4096


FONTS = Fonts
SIZES = Sizes


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )
