"""Unit tests for ConfigService."""

import json

from imagevideo.services.config_service import ConfigService, DEFAULT_CONFIG


def test_defaults_written_on_first_run(temp_dir, logger):
    config = ConfigService(temp_dir, logger)
    assert config.get("frame_axis") == 0
    assert (temp_dir / "app.json").exists()
    with open(temp_dir / "app.json") as f:
        assert json.load(f) == DEFAULT_CONFIG


def test_set_persists(temp_dir, logger):
    config = ConfigService(temp_dir, logger)
    config.set("frame_axis", 2)
    reloaded = ConfigService(temp_dir, logger)
    assert reloaded.get("frame_axis") == 2
    assert reloaded.get("fps") == 30.0


def test_corrupt_file_falls_back_to_defaults(temp_dir, logger):
    (temp_dir / "app.json").write_text("{not json")
    config = ConfigService(temp_dir, logger)
    assert config.get("frame_axis") == 0
    assert config.get("missing", "x") == "x"
