"""UI components for the image converter.

This package contains modular UI panels that can be easily rearranged
in the application layout.
"""

from ui.config_panel import ConfigPanel
from ui.console_panel import ConsolePanel
from ui.image_panel import ImagePanel
from ui.main_window import ConverterWindow
from ui.settings_dialog import SettingsDialog

__all__ = [
    "ConverterWindow",
    "ConfigPanel",
    "ConsolePanel",
    "ImagePanel",
    "SettingsDialog",
]
