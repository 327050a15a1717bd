"""
Unit tests for environment-driven API configuration.
"""

from pathlib import Path

from movie_catalog.api import config
from movie_catalog.core.catalog.origins import DEFAULT_ALLOWED_ORIGINS


class TestConfig:
    """Tests for config accessors."""

    def test_port_defaults_to_1234(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert config.get_api_port() == 1234

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert config.get_api_port() == 8080

    def test_seed_path_default_is_packaged(self, monkeypatch):
        monkeypatch.delenv("MOVIES_SEED_PATH", raising=False)
        path = Path(config.get_seed_path())
        assert path.name == "movies.json"
        assert path.exists()

    def test_seed_path_from_env(self, monkeypatch):
        monkeypatch.setenv("MOVIES_SEED_PATH", "/tmp/other.json")
        assert config.get_seed_path() == "/tmp/other.json"

    def test_allowed_origins_default(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
        assert config.get_allowed_origins() == list(DEFAULT_ALLOWED_ORIGINS)

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"
