"""Unit tests for togo config module."""

import json
from pathlib import Path

import pytest
from togo import config as config_module
from togo.config import DEFAULT_DATA_LOCATION, TogoConfig


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "togo" / "config.json"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TOGO_DATA_LOCATION", raising=False)


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestFromSettings:
    """Tests for TogoConfig.from_settings()."""

    def test_missing_file_uses_default(self, config_file: Path) -> None:
        """No config file should fall back to data.json."""
        config = TogoConfig.from_settings(config_file)
        assert config.data_location == DEFAULT_DATA_LOCATION == "data.json"

    def test_reads_data_location(self, config_file: Path) -> None:
        """dataLocation under the config key should be used."""
        _write(config_file, json.dumps({"config": {"dataLocation": "/tmp/t.json"}}))
        assert TogoConfig.from_settings(config_file).data_location == "/tmp/t.json"

    @pytest.mark.parametrize(
        "content",
        [
            "{broken",
            "[]",
            '{"config": "x"}',
            '{"config": {"dataLocation": 5}}',
            '{"config": {"dataLocation": ""}}',
            '{"other": {}}',
        ],
    )
    def test_unparsable_falls_back_silently(
        self, config_file: Path, content: str
    ) -> None:
        """Bad config content should fall back to the default without raising."""
        _write(config_file, content)
        assert TogoConfig.from_settings(config_file).data_location == "data.json"

    def test_env_used_when_file_silent(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """TOGO_DATA_LOCATION should apply when the file has no value."""
        monkeypatch.setenv("TOGO_DATA_LOCATION", "env.json")
        assert TogoConfig.from_settings(config_file).data_location == "env.json"

    def test_file_wins_over_env(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The config file should take priority over the environment."""
        monkeypatch.setenv("TOGO_DATA_LOCATION", "env.json")
        _write(config_file, json.dumps({"config": {"dataLocation": "file.json"}}))
        assert TogoConfig.from_settings(config_file).data_location == "file.json"

    def test_explicit_data_location_wins(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An explicit data_location should override every other source."""
        monkeypatch.setenv("TOGO_DATA_LOCATION", "env.json")
        _write(config_file, json.dumps({"config": {"dataLocation": "file.json"}}))
        config = TogoConfig.from_settings(config_file, data_location="cli.json")
        assert config.data_location == "cli.json"

    def test_default_config_file_location(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without an argument, CONFIG_FILE should be read."""
        _write(config_file, json.dumps({"config": {"dataLocation": "home.json"}}))
        monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
        assert TogoConfig.from_settings().data_location == "home.json"

    def test_config_is_frozen(self) -> None:
        """Configuration should not change after construction."""
        config = TogoConfig()
        with pytest.raises(AttributeError):
            config.data_location = "other.json"  # type: ignore[misc]
