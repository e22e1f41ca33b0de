"""Tests for configuration and logging utilities."""

import json

from connectk.utils import Config, Logger, MoveRecord, get_default_config


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert config.options == "7x6@4"
        assert config.max_width == 255
        assert config.max_height == 255
        assert config.log_dir is None

    def test_save_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        config = Config(options="4x3@3", max_width=10, log_dir="logs", verbose=False)
        config.save(str(path))

        loaded = Config.load(str(path))
        assert loaded == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("options: 9x9@5\n")

        loaded = Config.load(str(path))
        assert loaded.options == "9x9@5"
        assert loaded.max_height == 255
        assert loaded.verbose is True

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(str(path)) == get_default_config()

    def test_ensure_dirs(self, tmp_path):
        config = Config(log_dir=str(tmp_path / "a" / "b"))
        config.ensure_dirs()
        assert (tmp_path / "a" / "b").is_dir()


class TestLogger:
    def test_move_log_file(self, tmp_path):
        logger = Logger(log_dir=str(tmp_path), verbose=False)
        logger.log_move(MoveRecord(1, "X", 0, "X///#o", "ongoing"))
        logger.log_move(MoveRecord(2, "O", 1, "X/O//#x", "ongoing"))

        lines = logger.log_file.read_text().splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["player"] == "X"
        assert first["state"] == "X///#o"
        assert first["timestamp"]
        assert len(logger.move_history) == 2

    def test_no_log_dir(self):
        logger = Logger(verbose=False)
        logger.log_move(MoveRecord(1, "X", 0, "X///#o", "ongoing"))
        assert logger.log_file is None
        assert len(logger.move_history) == 1
