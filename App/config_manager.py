"""Configuration persistence manager for the image converter.

This module handles loading and saving of converter settings to/from JSON files.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from models import BYTE_ORDERS, CONFIG_FILE, MAX_LEVELS, MIN_LEVELS, ConverterConfig


class ConfigManager:
    """Handles loading and saving of converter configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.image_converter_config.json)
        """
        self.config_path = config_path

    def load(self) -> ConverterConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            ConverterConfig with loaded or default values
        """
        config = ConverterConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    config.resize_width = int(data.get("resize_width", config.resize_width))
                    config.resize_height = int(data.get("resize_height", config.resize_height))
                    config.levels = int(data.get("levels", config.levels))
                    config.preview_path = data.get("preview_path", config.preview_path)
                    config.hex_path = data.get("hex_path", config.hex_path)
                    config.byte_order = data.get("byte_order", config.byte_order)
                print(f"✓ Loaded configuration from {self.config_path}")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"Warning: Could not load config file: {e}")
            return ConverterConfig()

        # Out-of-range values would fail deep inside the pipeline
        defaults = ConverterConfig()
        if not MIN_LEVELS <= config.levels <= MAX_LEVELS:
            print(f"Warning: Ignoring invalid level count {config.levels}")
            config.levels = defaults.levels
        if config.byte_order not in BYTE_ORDERS:
            print(f"Warning: Ignoring invalid byte order {config.byte_order!r}")
            config.byte_order = defaults.byte_order

        return config

    def save(self, config: ConverterConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ConverterConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
