"""
Tests for YAML + environment configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from patro.core.config import Config
from patro.core.exceptions import ConfigurationError


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no PATRO_* variables set."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("PATRO_"):
            monkeypatch.delenv(key)
    return tmp_path


class TestConfigDefaults:
    """Built-in defaults when no file is present."""

    def test_defaults(self, isolated: Path):
        config = Config()
        assert config.date_format == "YYYY-MM-DD"
        assert config.month_display == "numeric"
        assert config.day_display == "numeric"
        assert config.language == "en"

    def test_unknown_key_returns_default(self, isolated: Path):
        assert Config().get("does.not.exist", default=42) == 42


class TestConfigYaml:
    """Loading from YAML files."""

    def test_explicit_file(self, isolated: Path):
        path = isolated / "custom.yaml"
        path.write_text("format:\n  pattern: DD/MM/YYYY\nlanguage: np\n", encoding="utf-8")

        config = Config(path)

        assert config.date_format == "DD/MM/YYYY"
        assert config.language == "np"
        assert config.month_display == "numeric"

    def test_default_location_discovered(self, isolated: Path):
        (isolated / "patro.yaml").write_text("format:\n  day_display: long\n", encoding="utf-8")
        assert Config().day_display == "long"

    def test_missing_explicit_file(self, isolated: Path):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(isolated / "nope.yaml")

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, isolated: Path):
        path = isolated / "broken.yaml"
        path.write_text("format: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Config(path)

    def test_non_mapping_yaml(self, isolated: Path):
        path = isolated / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Config(path)


class TestConfigEnvironment:
    """Environment variables override YAML."""

    def test_env_overrides_yaml(self, isolated: Path):
        path = isolated / "patro.yaml"
        path.write_text("format:\n  pattern: DD/MM/YYYY\n", encoding="utf-8")

        with patch.dict(os.environ, {"PATRO_FORMAT_PATTERN": "YYYY/MM/DD"}):
            assert Config().date_format == "YYYY/MM/DD"

    def test_env_values_are_typed(self, isolated: Path):
        with patch.dict(os.environ, {"PATRO_DEBUG": "yes", "PATRO_WIDTH": "3"}):
            config = Config()
            assert config.get("debug") is True
            assert config.get("width") == 3

    def test_dotenv_file(self, isolated: Path):
        env_file = isolated / ".env"
        env_file.write_text("PATRO_LANGUAGE=np\n", encoding="utf-8")

        with patch.dict(os.environ, {}):
            assert Config(env_file=env_file).language == "np"

    def test_repr(self, isolated: Path):
        assert repr(Config()) == "Config(path=None)"
