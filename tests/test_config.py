"""Tests for configuration loading."""

import logging

import pytest

from maxattend.config import Config, load_config


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str):
        path = tmp_path / "maxattend.conf"
        path.write_text(text)
        return path
    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.conf")
        assert config == Config()
        assert config.invalid_intervals == "reject"
        assert config.log_level == "WARNING"

    def test_reads_values(self, write_config):
        path = write_config("INVALID_INTERVALS=discard\nLOG_LEVEL=debug\n")
        config = load_config(path)
        assert config.invalid_intervals == "discard"
        assert config.log_level == "DEBUG"

    def test_comments_and_quotes(self, write_config):
        path = write_config(
            "# settings\n"
            "\n"
            'invalid_intervals = "DISCARD" # drop bad rows\n'
            "log_level = info # inline comment\n"
            "not a setting\n"
        )
        config = load_config(path)
        assert config.invalid_intervals == "discard"
        assert config.log_level == "INFO"

    def test_single_quotes(self, write_config):
        config = load_config(write_config("log_level = 'error'\n"))
        assert config.log_level == "ERROR"

    def test_unknown_policy_keeps_default(self, write_config, caplog):
        path = write_config("invalid_intervals = ignore\n")
        with caplog.at_level(logging.WARNING, logger="maxattend.config"):
            config = load_config(path)
        assert config.invalid_intervals == "reject"
        assert "INVALID_INTERVALS" in caplog.text

    def test_unknown_keys_ignored(self, write_config):
        assert load_config(write_config("color = blue\n")) == Config()
