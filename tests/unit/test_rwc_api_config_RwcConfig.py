"""Unit tests for rwc.api.config.RwcConfig module."""

import json

import pytest

from rwc.api.config.RwcConfig import RwcConfig
from rwc.constants import BUFFER_SIZE

pytestmark = pytest.mark.unit


class TestRwcConfigLoad:
    """Test RwcConfig.load() method."""

    def test_missing_file_gives_defaults(self, rwc_home):
        config = RwcConfig.load()
        assert config.buffer_size == BUFFER_SIZE
        assert config.max_workers is None
        assert config.format == "table"
        assert config.log_level == "WARNING"

    def test_load_values(self, rwc_home):
        (rwc_home / "config.json").write_text(
            json.dumps({"buffer_size": 4096, "max_workers": 2, "format": "csv", "log_level": "DEBUG"})
        )
        config = RwcConfig.load()
        assert config.buffer_size == 4096
        assert config.max_workers == 2
        assert config.format == "csv"
        assert config.log_level == "DEBUG"

    def test_load_invalid_json(self, rwc_home):
        (rwc_home / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError) as exc_info:
            RwcConfig.load()
        assert "Invalid JSON" in str(exc_info.value)

    def test_load_non_object(self, rwc_home):
        (rwc_home / "config.json").write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            RwcConfig.load()

    def test_load_unknown_key(self, rwc_home):
        (rwc_home / "config.json").write_text(json.dumps({"colour": "red"}))
        with pytest.raises(ValueError) as exc_info:
            RwcConfig.load()
        assert "Configuration validation error" in str(exc_info.value)
        assert "colour" in str(exc_info.value)

    def test_load_invalid_buffer_size(self, rwc_home):
        (rwc_home / "config.json").write_text(json.dumps({"buffer_size": 0}))
        with pytest.raises(ValueError, match="buffer_size"):
            RwcConfig.load()


def test_config_path_follows_rwc_home(rwc_home):
    assert RwcConfig.get_config_path() == rwc_home.resolve() / "config.json"


def test_config_path_defaults_under_home(tmp_path, monkeypatch):
    monkeypatch.delenv("RWC_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert RwcConfig.get_config_path() == tmp_path / ".rwc" / "config.json"
