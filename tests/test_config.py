"""
Tests for environment-based configuration.
"""

import pytest

from unidiffr.config import load_config


class TestLoadConfig:

    def test_defaults(self):
        assert load_config() == {
            "output_format": "raw",
            "json_indent": 2,
            "log_level": "WARNING",
        }

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("UNIDIFFR_OUTPUT_FORMAT", " JSON ")
        monkeypatch.setenv("UNIDIFFR_JSON_INDENT", "4")
        monkeypatch.setenv("UNIDIFFR_LOG_LEVEL", "debug")

        config = load_config()

        assert config["output_format"] == "json"
        assert config["json_indent"] == 4
        assert config["log_level"] == "DEBUG"

    @pytest.mark.parametrize("value", ["", "  ", "four", "2.5", "-2", "-1"])
    def test_bad_indent_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("UNIDIFFR_JSON_INDENT", value)

        assert load_config()["json_indent"] == 2

    def test_each_call_returns_a_new_dict(self):
        first = load_config()
        first["output_format"] = "json"

        assert load_config()["output_format"] == "raw"
