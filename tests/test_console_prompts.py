import pytest

from console_prompts import parse_dimension, prompt_parameters, run
from models import ConverterConfig


def answers(*lines):
    """input() replacement returning the given lines in order."""
    remaining = iter(lines)
    return lambda: next(remaining)


@pytest.mark.parametrize("text, value", [("64", 64), (" 12\n", 12), ("0", 0)])
def test_parse_dimension(text, value):
    assert parse_dimension(text) == value


@pytest.mark.parametrize("text", ["", "abc", "1.5", "-3"])
def test_parse_dimension_rejects_non_numbers(text):
    with pytest.raises(ValueError, match="Please input a number"):
        parse_dimension(text)


def test_prompts_in_order(capsys):
    width, height, file_name = prompt_parameters(answers("8", "6", " cat.png \n"))

    assert (width, height, file_name) == (8, 6, "cat.png")
    assert capsys.readouterr().out.splitlines() == [
        "Image resize width:",
        "Image resize height:",
        "Input file name:",
    ]


def test_run_converts_image(tmp_path, solid_png, capsys):
    config = ConverterConfig(
        preview_path=str(tmp_path / "preview.png"),
        hex_path=str(tmp_path / "image.hex"),
    )

    status = run(config, answers("2", "2", str(solid_png)))

    assert status == 0
    assert (tmp_path / "image.hex").read_text() == "1b 1b 1b 1b "
    assert (tmp_path / "preview.png").exists()
    assert "✓ 4 pixels" in capsys.readouterr().out


def test_run_stops_on_parse_error(tmp_path, capsys):
    config = ConverterConfig(hex_path=str(tmp_path / "image.hex"))

    status = run(config, answers("wide", "2", "cat.png"))

    assert status == 1
    assert not (tmp_path / "image.hex").exists()
    assert "Error: Please input a number" in capsys.readouterr().out


def test_run_stops_on_decode_error(tmp_path, capsys):
    config = ConverterConfig(hex_path=str(tmp_path / "image.hex"))

    status = run(config, answers("2", "2", str(tmp_path / "missing.png")))

    assert status == 1
    assert not (tmp_path / "image.hex").exists()
    assert "Failed to load image" in capsys.readouterr().out


def test_run_reports_write_error(tmp_path, solid_png, capsys):
    config = ConverterConfig(
        preview_path=str(tmp_path / "preview.png"),
        hex_path=str(tmp_path / "missing" / "image.hex"),
    )

    status = run(config, answers("2", "2", str(solid_png)))

    assert status == 1
    assert "Error writing" in capsys.readouterr().out
