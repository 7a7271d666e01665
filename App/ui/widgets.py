"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from PyQt6.QtWidgets import QComboBox, QLineEdit, QSpinBox


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        step: int = 1,
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a configured QSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            suffix: Suffix text
            step: Single step increment
            tooltip: Tooltip text

        Returns:
            Configured QSpinBox
        """
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setSingleStep(step)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_line_edit(text: str, tooltip: str = "") -> QLineEdit:
        """Create a QLineEdit pre-filled with text."""
        line_edit = QLineEdit(text)
        if tooltip:
            line_edit.setToolTip(tooltip)
        return line_edit

    @staticmethod
    def create_combo(
        items: "list[str]", current: str, tooltip: str = ""
    ) -> QComboBox:
        """Create a QComboBox with the given items and current selection."""
        combo = QComboBox()
        combo.addItems(items)
        if current in items:
            combo.setCurrentText(current)
        if tooltip:
            combo.setToolTip(tooltip)
        return combo
