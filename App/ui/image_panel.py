"""Image import and conversion panel for the image-to-hex workflow."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from PIL import Image
from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from image_conversion import ImageConverter
from image_conversion.packing import bus_width, pixel_data_bytes
from image_conversion.utils import grid_to_image
from models import MAX_LEVELS, MIN_LEVELS, ConversionResult, ConverterConfig
from ui.styles import SIZES, panel_stylesheet
from ui.widgets import WidgetFactory


class ConversionThread(QThread):
    """Background thread for image conversion to avoid blocking UI."""

    finished = pyqtSignal(object)  # ConversionResult
    error = pyqtSignal(str)  # Error message
    progress = pyqtSignal(int)  # Progress percentage

    def __init__(self, file_path: str, config: ConverterConfig):
        super().__init__()
        self.file_path = file_path
        # Snapshot; the panel keeps editing its own config while this runs
        self.config = replace(config)

    def run(self):
        """Execute the conversion in background."""
        try:
            converter = ImageConverter(self.config)

            self.progress.emit(10)
            result = converter.convert(self.file_path)

            self.progress.emit(100)
            self.finished.emit(result)

        except Exception as e:
            self.error.emit(str(e))


def pil_to_pixmap(image: Image.Image) -> QPixmap:
    """Convert an RGB Pillow image to a QPixmap."""
    rgb = image.convert("RGB")
    data = rgb.tobytes("raw", "RGB")
    qimage = QImage(
        data, rgb.width, rgb.height, rgb.width * 3, QImage.Format.Format_RGB888
    )
    # copy() detaches the QImage from the Python buffer
    return QPixmap.fromImage(qimage.copy())


class ImagePanel(QGroupBox):
    """Panel for image selection, conversion parameters and preview."""

    # Signals for communication with main window
    conversion_complete = pyqtSignal(object)  # ConversionResult
    conversion_failed = pyqtSignal(str)
    config_changed = pyqtSignal(object)  # ConverterConfig

    def __init__(self, config: ConverterConfig, parent: QWidget | None = None):
        super().__init__("Image Conversion", parent)
        self.config = config
        self.current_image_path: str | None = None
        self.last_result: ConversionResult | None = None
        self.conversion_thread: ConversionThread | None = None

        self._setup_ui()
        self._connect_signals()
        self._update_packing_label()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # --- Image Selection Section ---
        self._create_file_selection(layout)

        # --- Source and Preview Images ---
        self._create_preview_area(layout)

        # --- Size and Quantization Controls ---
        self._create_parameter_controls(layout)

        # --- Action Buttons ---
        self._create_action_buttons(layout)

        # --- Progress and Status ---
        self._create_status_area(layout)

        self.setLayout(layout)

    def _create_file_selection(self, parent_layout: QVBoxLayout):
        """Create file selection controls."""
        file_layout = QHBoxLayout()

        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        file_layout.addWidget(self.browse_btn)

        parent_layout.addLayout(file_layout)

    def _create_preview_label(self, text: str) -> QLabel:
        label = QLabel()
        label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(panel_stylesheet())
        label.setText(text)
        return label

    def _create_preview_area(self, parent_layout: QVBoxLayout):
        """Create side-by-side source and quantized previews."""
        preview_layout = QHBoxLayout()

        self.source_label = self._create_preview_label("Source image")
        preview_layout.addWidget(self.source_label)

        self.preview_label = self._create_preview_label(
            "Quantized preview will appear here"
        )
        preview_layout.addWidget(self.preview_label)

        parent_layout.addLayout(preview_layout)

    def _create_parameter_controls(self, parent_layout: QVBoxLayout):
        """Create target size and level controls."""
        params_group = QGroupBox("Conversion Parameters")
        params_layout = QFormLayout()

        self.width_spin = WidgetFactory.create_int_spinbox(
            0, SIZES.MAX_DIMENSION, self.config.resize_width, " px",
            tooltip="Target width in pixels",
        )
        params_layout.addRow("Width:", self.width_spin)

        self.height_spin = WidgetFactory.create_int_spinbox(
            0, SIZES.MAX_DIMENSION, self.config.resize_height, " px",
            tooltip="Target height in pixels",
        )
        params_layout.addRow("Height:", self.height_spin)

        self.levels_spin = WidgetFactory.create_int_spinbox(
            MIN_LEVELS, MAX_LEVELS, self.config.levels,
            tooltip="Discrete values each color channel can take",
        )
        params_layout.addRow("Levels per channel:", self.levels_spin)

        self.packing_label = QLabel()
        params_layout.addRow("Packing:", self.packing_label)

        params_group.setLayout(params_layout)
        parent_layout.addWidget(params_group)

    def _create_action_buttons(self, parent_layout: QVBoxLayout):
        """Create the convert button."""
        self.convert_btn = QPushButton("Convert")
        self.convert_btn.setEnabled(False)
        self.convert_btn.setToolTip("Write the preview image and hex dump")
        parent_layout.addWidget(self.convert_btn)

    def _create_status_area(self, parent_layout: QVBoxLayout):
        """Create progress bar and status label."""
        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        parent_layout.addWidget(self.progress_bar)

        self.status_label = QLabel("Select an image to begin.")
        self.status_label.setWordWrap(True)
        parent_layout.addWidget(self.status_label)

    def _connect_signals(self):
        """Connect internal widget signals."""
        self.browse_btn.clicked.connect(self._on_browse_clicked)
        self.convert_btn.clicked.connect(self._on_convert_clicked)
        self.width_spin.valueChanged.connect(
            lambda v: self._set_config_value("resize_width", v)
        )
        self.height_spin.valueChanged.connect(
            lambda v: self._set_config_value("resize_height", v)
        )
        self.levels_spin.valueChanged.connect(self._on_levels_changed)

    # === Event Handlers ===

    def _on_browse_clicked(self):
        """Handle browse button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff);;All Files (*)",
        )
        if file_path:
            self._load_image(file_path)

    def _load_image(self, file_path: str):
        """Load and display the source image."""
        self.current_image_path = file_path
        self.file_path_label.setText(f"Selected: {Path(file_path).name}")

        pixmap = QPixmap(file_path)
        if pixmap.isNull():
            self.status_label.setText("Failed to load image preview.")
            return

        self.source_label.setPixmap(self._fit_to_preview(pixmap))
        self.convert_btn.setEnabled(True)
        self.status_label.setText("Image loaded. Ready to convert.")

    def _fit_to_preview(self, pixmap: QPixmap) -> QPixmap:
        width, height = SIZES.PREVIEW_MAX_SIZE
        # Nearest-neighbor scaling keeps the quantized blocks crisp
        return pixmap.scaled(
            width,
            height,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.FastTransformation,
        )

    def _set_config_value(self, name: str, value):
        setattr(self.config, name, value)
        self.config_changed.emit(self.config)

    def _on_levels_changed(self, value: int):
        """Update level count and the derived packing summary."""
        self._set_config_value("levels", value)
        self._update_packing_label()

    def _update_packing_label(self):
        levels = self.config.levels
        self.packing_label.setText(
            f"{bus_width(levels)} bits/channel, "
            f"{pixel_data_bytes(levels)} byte(s)/pixel"
        )

    def _set_busy(self, busy: bool):
        self.convert_btn.setEnabled(not busy and self.current_image_path is not None)
        self.browse_btn.setEnabled(not busy)
        for spin in (self.width_spin, self.height_spin, self.levels_spin):
            spin.setEnabled(not busy)
        self.progress_bar.setVisible(busy)

    def _on_convert_clicked(self):
        """Start the conversion in a background thread."""
        if not self.current_image_path:
            return

        self._set_busy(True)
        self.progress_bar.setValue(0)
        self.status_label.setText("Converting image...")

        self.conversion_thread = ConversionThread(self.current_image_path, self.config)
        self.conversion_thread.finished.connect(self._on_conversion_finished)
        self.conversion_thread.error.connect(self._on_conversion_error)
        self.conversion_thread.progress.connect(self.progress_bar.setValue)
        self.conversion_thread.start()

    def _on_conversion_finished(self, result: ConversionResult):
        """Handle a completed conversion."""
        self.last_result = result
        self._set_busy(False)

        grid = result.preview_grid
        if grid is not None and grid.size:
            preview = grid_to_image(grid)
            self.preview_label.setPixmap(self._fit_to_preview(pil_to_pixmap(preview)))

        self.status_label.setText(
            f"Success! {result.pixel_count} pixels, "
            f"{result.bytes_written} bytes written to {result.hex_path}"
        )
        self.conversion_complete.emit(result)

    def _on_conversion_error(self, error_msg: str):
        """Handle a conversion error."""
        self._set_busy(False)
        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setText(f"Error: {pretty_msg}")
        self.conversion_failed.emit(pretty_msg)

    # === Public Methods ===

    def update_config(self, config: ConverterConfig):
        """Replace the configuration (e.g. after the settings dialog)."""
        self.config = config
        self.width_spin.setValue(config.resize_width)
        self.height_spin.setValue(config.resize_height)
        self.levels_spin.setValue(config.levels)
        self._update_packing_label()
