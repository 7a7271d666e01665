import json

from config_manager import ConfigManager
from models import ConverterConfig


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigManager(tmp_path / "config.json").load()
    assert config == ConverterConfig()
    assert config.levels == 3
    assert config.preview_path == "preview.png"
    assert config.hex_path == "image.hex"
    assert config.byte_order == "big"


def test_save_then_load(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    config = ConverterConfig(
        resize_width=32,
        resize_height=24,
        levels=15,
        preview_path="out/preview.png",
        hex_path="out/rom.hex",
        byte_order="little",
    )

    assert manager.save(config) == (True, None)
    assert manager.load() == config


def test_partial_file_falls_back_per_field(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"levels": 7}))

    config = ConfigManager(path).load()

    assert config.levels == 7
    assert config.resize_width == ConverterConfig().resize_width
    assert "Loaded configuration" in capsys.readouterr().out


def test_corrupt_file_warns_and_uses_defaults(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = ConfigManager(path).load()

    assert config == ConverterConfig()
    assert "Warning: Could not load config file" in capsys.readouterr().out


def test_out_of_range_values_are_replaced(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"levels": 300, "byte_order": "middle", "hex_path": "a.hex"}))

    config = ConfigManager(path).load()

    assert config.levels == 3
    assert config.byte_order == "big"
    assert config.hex_path == "a.hex"
    out = capsys.readouterr().out
    assert "invalid level count 300" in out
    assert "invalid byte order" in out


def test_save_failure_is_reported(tmp_path):
    manager = ConfigManager(tmp_path / "missing" / "config.json")
    success, error = manager.save(ConverterConfig())
    assert not success
    assert error
