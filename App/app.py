"""Image to Hex Converter - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import ConverterWindow


def main():
    """Launch the image converter application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Image to Hex Converter")
    app.setApplicationName("ImageHexConverter")

    window = ConverterWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
