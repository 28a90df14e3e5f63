"""
Tests for configuration loading and validation.
"""

import logging

import pytest
from pydantic import ValidationError

from nexus_scheduling.config import AppConfig, load_config


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.api_base_url == "http://localhost:8000"
        assert config.timezone == "UTC"
        assert config.default_pathway_id == 1
        assert config.get_log_level() == logging.WARNING

    def test_base_url_trailing_slash_removed(self):
        assert AppConfig(api_base_url="https://api.example.com/").api_base_url == "https://api.example.com"

    def test_relative_base_url_rejected(self):
        with pytest.raises(ValidationError, match="api_base_url"):
            AppConfig(api_base_url="api.example.com")

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            AppConfig(timezone="Mars/Olympus_Mons")

    @pytest.mark.parametrize("field", ["default_pathway_id", "request_timeout"])
    def test_non_positive_values_rejected(self, field):
        with pytest.raises(ValidationError, match="greater than zero"):
            AppConfig(**{field: 0})

    def test_log_level_normalised(self):
        config = AppConfig(log_level="debug")

        assert config.log_level == "DEBUG"
        assert config.get_log_level() == logging.DEBUG

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="log_level"):
            AppConfig(log_level="chatty")


class TestLoadFromYaml:
    """Tests for YAML loading."""

    def test_load_valid_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "api_base_url: https://scheduling.example.com\n"
            "timezone: America/Chicago\n"
            "default_pathway_id: 3\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.api_base_url == "https://scheduling.example.com"
        assert config.timezone == "America/Chicago"
        assert config.default_pathway_id == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("timezone: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_non_mapping_root(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(config_path)

    def test_empty_file_gives_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(config_path) == AppConfig()

    def test_load_config_without_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("nexus_scheduling.config.get_default_config_path", lambda: tmp_path / "config.yaml")

        assert load_config() == AppConfig()
