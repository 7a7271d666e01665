"""Output configuration panel."""

from PyQt6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QPushButton,
    QVBoxLayout,
)

from models import BYTE_ORDERS, DEFAULT_HEX_PATH, DEFAULT_PREVIEW_PATH, ConverterConfig
from ui.widgets import WidgetFactory


class ConfigPanel(QGroupBox):
    """Panel for output file locations and byte ordering."""

    def __init__(self, config: ConverterConfig, parent=None):
        super().__init__("Output Configuration", parent)
        self.config = config
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        main_layout = QVBoxLayout()

        # --- Output Files Group ---
        files_group = QGroupBox("Output Files")
        files_layout = QFormLayout()
        self.preview_path_input = WidgetFactory.create_line_edit(
            self.config.preview_path, "Where the quantized preview image is saved"
        )
        files_layout.addRow("Preview image:", self.preview_path_input)

        self.hex_path_input = WidgetFactory.create_line_edit(
            self.config.hex_path, "Where the hex dump is written"
        )
        files_layout.addRow("Hex dump:", self.hex_path_input)

        files_group.setLayout(files_layout)
        main_layout.addWidget(files_group)

        # --- Packing Group ---
        packing_group = QGroupBox("Packing")
        packing_layout = QFormLayout()
        self.byte_order_combo = WidgetFactory.create_combo(
            list(BYTE_ORDERS),
            self.config.byte_order,
            "big: most significant byte first; little: least significant first",
        )
        packing_layout.addRow("Byte order:", self.byte_order_combo)

        packing_group.setLayout(packing_layout)
        main_layout.addWidget(packing_group)

        # --- Reset Button ---
        self.reset_btn = QPushButton("↺ Reset to Defaults")
        self.reset_btn.setToolTip(
            f"Reset to default values ({DEFAULT_PREVIEW_PATH}, {DEFAULT_HEX_PATH}, big)"
        )
        self.reset_btn.clicked.connect(self._reset)
        main_layout.addWidget(self.reset_btn)

        main_layout.addStretch()
        self.setLayout(main_layout)

    def _reset(self):
        """Restore the default output settings."""
        defaults = ConverterConfig()
        self.set_values(defaults.preview_path, defaults.hex_path, defaults.byte_order)

    def get_values(self) -> ConverterConfig:
        """Get input values as ConverterConfig, keeping the size and levels."""
        return ConverterConfig(
            resize_width=self.config.resize_width,
            resize_height=self.config.resize_height,
            levels=self.config.levels,
            preview_path=self.preview_path_input.text().strip() or DEFAULT_PREVIEW_PATH,
            hex_path=self.hex_path_input.text().strip() or DEFAULT_HEX_PATH,
            byte_order=self.byte_order_combo.currentText(),
        )

    def set_values(self, preview_path: str, hex_path: str, byte_order: str):
        """Set input values."""
        self.preview_path_input.setText(preview_path)
        self.hex_path_input.setText(hex_path)
        self.byte_order_combo.setCurrentText(byte_order)
