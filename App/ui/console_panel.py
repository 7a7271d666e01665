"""Conversion log panel with timestamped entries and export."""

from datetime import datetime
from pathlib import Path

from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from ui.styles import FONTS, SIZES


class ConsolePanel(QGroupBox):
    """Running log of conversions, saves and errors."""

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        # AIDEV-NOTE: Plain text with a block cap; long sessions of batch
        # conversions would otherwise grow the document without bound.
        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumBlockCount(SIZES.CONSOLE_MAX_LINES)
        self.log_view.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.log_view.setFont(FONTS.CONSOLE)
        layout.addWidget(self.log_view)

        button_row = QHBoxLayout()
        self.save_btn = QPushButton("Save Log...")
        self.save_btn.clicked.connect(self._on_save_clicked)
        button_row.addWidget(self.save_btn)

        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self.clear)
        button_row.addWidget(self.clear_btn)
        layout.addLayout(button_row)

        self.setLayout(layout)

    def log(self, message: str):
        """Append a message, one timestamped line per message line."""
        stamp = datetime.now().strftime("%H:%M:%S")
        for line in message.splitlines() or [""]:
            self.log_view.appendPlainText(f"[{stamp}] {line}")
        self.log_view.ensureCursorVisible()

    def text(self) -> str:
        return self.log_view.toPlainText()

    def clear(self):
        self.log_view.clear()

    def save_to(self, file_path: str | Path) -> tuple[bool, str | None]:
        """Write the log to a text file.

        Returns:
            Tuple of (success, error_message)
        """
        try:
            Path(file_path).write_text(self.text() + "\n", encoding="utf-8")
            return True, None
        except OSError as e:
            return False, str(e)

    def _on_save_clicked(self):
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Log", "conversion.log", "Log Files (*.log *.txt);;All Files (*)"
        )
        if not file_path:
            return

        success, error = self.save_to(file_path)
        if success:
            self.log(f"✓ Log saved to {file_path}")
        else:
            self.log(f"❌ Error saving log: {error}")
