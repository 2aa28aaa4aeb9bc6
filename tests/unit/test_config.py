"""
Testes unitários para Settings.
"""
import pytest
from pydantic import ValidationError

from src.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("RATE_LIMIT_REQUESTS", "RATE_LIMIT_WINDOW_MINUTES", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Testa configurações."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api"
        assert settings.captions_cache_ttl_seconds == 86400
        assert settings.error_cache_ttl_seconds == 300
        assert settings.error_retry_after_seconds == 300
        assert settings.rate_limit == "100/15 minutes"
        assert settings.get_cors_origins() == ["*"]

    def test_values_from_environment(self, clean_env):
        clean_env.setenv("RATE_LIMIT_REQUESTS", "50")
        clean_env.setenv("RATE_LIMIT_WINDOW_MINUTES", "1")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.rate_limit == "50/1 minutes"
        assert settings.log_level == "DEBUG"

    def test_cors_origins_list(self, clean_env):
        clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

        settings = Settings(_env_file=None)

        assert settings.get_cors_origins() == ["https://a.example", "https://b.example"]

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rate_limit_must_be_positive(self, clean_env):
        clean_env.setenv("RATE_LIMIT_REQUESTS", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
