"""Settings dialog for converter output configuration."""

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QVBoxLayout,
)

from models import ConverterConfig
from ui.config_panel import ConfigPanel


class SettingsDialog(QDialog):
    """Dialog window for editing output settings."""

    def __init__(self, config: ConverterConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Image Converter Settings")
        self.setMinimumWidth(450)
        self.config = config
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the dialog UI."""
        layout = QVBoxLayout()

        self.config_panel = ConfigPanel(self.config)
        layout.addWidget(self.config_panel)

        # Dialog buttons (OK/Cancel)
        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

        self.setLayout(layout)

    def get_values(self) -> ConverterConfig:
        """Get configuration values from the panel."""
        return self.config_panel.get_values()
