import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from models import ConverterConfig  # noqa: E402
from ui.console_panel import ConsolePanel  # noqa: E402
from ui.image_panel import ConversionThread, ImagePanel  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def config(tmp_path):
    return ConverterConfig(
        resize_width=2,
        resize_height=2,
        levels=3,
        preview_path=str(tmp_path / "preview.png"),
        hex_path=str(tmp_path / "image.hex"),
    )


def run_thread(thread):
    """Run a ConversionThread inline, collecting what it emits."""
    results, errors = [], []
    thread.finished.connect(results.append)
    thread.error.connect(errors.append)
    thread.run()
    return results, errors


def test_thread_ignores_config_edits_after_start(qapp, config, solid_png, tmp_path):
    thread = ConversionThread(str(solid_png), config)
    config.levels = 15
    config.resize_width = 1
    config.hex_path = str(tmp_path / "other.hex")

    results, errors = run_thread(thread)

    assert errors == []
    result = results[0]
    assert (result.levels, result.width, result.height) == (3, 2, 2)
    assert (tmp_path / "image.hex").read_text() == "1b 1b 1b 1b "
    assert not (tmp_path / "other.hex").exists()
    # Preview comes from the same run as the dump
    assert (result.preview_grid == [85, 170, 255]).all()


def test_thread_reports_any_failure(qapp, config, tmp_path):
    results, errors = run_thread(ConversionThread(str(tmp_path / "nope.png"), config))

    assert results == []
    assert "Failed to load image" in errors[0]


def test_busy_panel_locks_parameters(qapp, config):
    panel = ImagePanel(config)
    spins = (panel.width_spin, panel.height_spin, panel.levels_spin)

    panel._set_busy(True)
    assert not any(spin.isEnabled() for spin in spins)

    panel._set_busy(False)
    assert all(spin.isEnabled() for spin in spins)


def test_finished_conversion_shows_preview(qapp, config, solid_png):
    panel = ImagePanel(config)
    results, _ = run_thread(ConversionThread(str(solid_png), config))

    panel._on_conversion_finished(results[0])

    assert panel.last_result is results[0]
    assert not panel.preview_label.pixmap().isNull()
    assert "4 bytes written" in panel.status_label.text()


def test_console_log_is_timestamped_per_line(qapp):
    panel = ConsolePanel()
    panel.log("✓ Converted cat.png\n   4 bytes → image.hex")

    lines = panel.text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("] ✓ Converted cat.png")
    assert lines[1].endswith("]    4 bytes → image.hex")
    assert all(line.startswith("[") for line in lines)

    panel.clear()
    assert panel.text() == ""


def test_console_save_to(qapp, tmp_path):
    panel = ConsolePanel()
    panel.log("first")

    assert panel.save_to(tmp_path / "session.log") == (True, None)
    assert (tmp_path / "session.log").read_text(encoding="utf-8").strip().endswith("first")

    success, error = panel.save_to(tmp_path / "missing" / "session.log")
    assert not success
    assert error
