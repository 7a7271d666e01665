"""Main application window for the image converter."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QDockWidget,
    QMainWindow,
    QMessageBox,
    QToolBar,
)

from config_manager import ConfigManager
from models import ConversionResult, ConverterConfig
from ui.console_panel import ConsolePanel
from ui.image_panel import ImagePanel
from ui.settings_dialog import SettingsDialog


class ConverterWindow(QMainWindow):
    """Main application window for image-to-hex conversion."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Image to Hex Converter v0.1.0")
        self.setMinimumSize(900, 700)

        # Application state
        self.config_manager = ConfigManager()
        self.config = self.config_manager.load()

        # UI component references (created in _setup_ui)
        self.image_panel: ImagePanel
        self.console_panel: ConsolePanel
        self.console_dock: QDockWidget

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_toolbar()

        self.image_panel = ImagePanel(self.config)
        self.setCentralWidget(self.image_panel)

        self.console_panel = ConsolePanel()
        self.console_dock = QDockWidget("Console", self)
        self.console_dock.setWidget(self.console_panel)
        self.console_dock.setAllowedAreas(
            Qt.DockWidgetArea.BottomDockWidgetArea
            | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.console_dock)

        self._create_menu_bar()

    def _create_menu_bar(self):
        """Create the menu bar with a View menu for the console toggle."""
        menubar = self.menuBar()
        if menubar is None:
            return

        view_menu = menubar.addMenu("&View")
        if view_menu is None:
            return

        action = self.console_dock.toggleViewAction()
        if action:
            action.setText("Show Console")
            view_menu.addAction(action)

    def _create_toolbar(self):
        """Create the main toolbar with settings."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        settings_action = QAction("⚙️ Settings", self)
        settings_action.setToolTip("Open output settings")
        settings_action.triggered.connect(self._open_settings_dialog)
        toolbar.addAction(settings_action)

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.image_panel.conversion_complete.connect(self._on_conversion_complete)
        self.image_panel.conversion_failed.connect(
            lambda msg: self.console_panel.log(f"❌ Conversion failed: {msg}")
        )
        self.image_panel.config_changed.connect(self._on_config_changed)

    # === Settings Dialog ===

    def _open_settings_dialog(self):
        """Open the settings dialog for output configuration."""
        dialog = SettingsDialog(self.config, self)

        if dialog.exec():  # User clicked OK
            self.config = dialog.get_values()
            self.image_panel.update_config(self.config)
            self._save_config()
            self.console_panel.log(
                f"Output: {self.config.hex_path} "
                f"(preview {self.config.preview_path}, {self.config.byte_order}-endian)"
            )

    def _on_config_changed(self, config: ConverterConfig):
        self.config = config

    def _save_config(self):
        """Persist the current configuration, reporting failures."""
        success, error = self.config_manager.save(self.config)
        if not success:
            self.console_panel.log(f"❌ Error saving config: {error}")
            QMessageBox.warning(
                self,
                "Save Error",
                f"Could not save configuration:\n{error}",
            )
        else:
            self.console_panel.log("✓ Configuration saved")

    # === Conversion Results ===

    def _on_conversion_complete(self, result: ConversionResult):
        """Log a finished conversion and remember its parameters."""
        self.console_panel.log(
            f"✓ Converted {result.source_path} "
            f"({result.original_width}x{result.original_height} → "
            f"{result.width}x{result.height})"
        )
        self.console_panel.log(
            f"   {result.levels} levels, block size {result.block_size}, "
            f"{result.bus_bits} bits/channel, {result.pixel_data_bytes} byte(s)/pixel"
        )
        self.console_panel.log(
            f"   {result.bytes_written} bytes → {result.hex_path}"
        )
        if result.preview_saved:
            self.console_panel.log(f"   Preview → {result.preview_path}")
        else:
            self.console_panel.log(
                f"⚠️ Preview could not be saved to {result.preview_path}"
            )

        self._save_config()

    def closeEvent(self, event):
        """Wait for a running conversion before closing."""
        thread = self.image_panel.conversion_thread
        if thread and thread.isRunning():
            thread.wait()
        super().closeEvent(event)
