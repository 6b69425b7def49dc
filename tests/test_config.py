"""
Tests for the yaml configuration.
"""
import pytest

from icsreader import load_config
from icsreader.config import DEFAULTS


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config["trim_crlf"] is True
        assert config["calendars"] == []
        for k, v in DEFAULTS.items():
            assert config[k] == v

    def test_defaults_are_not_shared(self):
        load_config()["calendars"].append("x.ics")
        assert load_config()["calendars"] == []

    def test_file_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "log_level: DEBUG\n"
            "trim_crlf: false\n"
            "calendars:\n"
            "  - https://example.com/a.ics\n"
            "  - local.ics\n"
            "extra: kept\n"
        )
        config = load_config(str(path))
        assert config["log_level"] == "DEBUG"
        assert config["trim_crlf"] is False
        assert config["calendars"] == ["https://example.com/a.ics", "local.ics"]
        assert config["extra"] == "kept"
        assert config["timeout"] == DEFAULTS["timeout"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path))["log_level"] == "INFO"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))
