"""
Tests for brewcalc configuration.
"""

from pathlib import Path

import pytest

from brewcalc.config import BrewcalcConfig, OutputFormat, get_config
from brewcalc.exceptions import ConfigurationError


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BREWCALC_OUTPUT_DIR", raising=False)
        monkeypatch.delenv("BREWCALC_FORMAT", raising=False)
        config = get_config()
        assert config.output_dir == Path(".")
        assert config.output_format is OutputFormat.XML

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BREWCALC_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("BREWCALC_FORMAT", "YAML")
        config = get_config()
        assert config.output_dir == tmp_path
        assert config.output_format is OutputFormat.YAML

    def test_invalid_format(self, monkeypatch):
        monkeypatch.setenv("BREWCALC_FORMAT", "json")
        with pytest.raises(ConfigurationError, match="BREWCALC_FORMAT"):
            get_config()


class TestBrewcalcConfig:
    """Tests for BrewcalcConfig."""

    def test_expands_user(self):
        config = BrewcalcConfig(output_dir="~/exports")
        assert config.output_dir == Path.home() / "exports"

    def test_format_from_string(self):
        config = BrewcalcConfig(output_dir=".", output_format="yaml")
        assert config.output_format is OutputFormat.YAML
