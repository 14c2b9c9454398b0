"""Tests for application settings and API key validation."""
import pytest
from pydantic import ValidationError

from agrifusion.core.config import Settings, validate_api_key


class TestValidateApiKey:

    def test_missing_key_is_invalid(self):
        assert validate_api_key("") is False

    def test_key_without_prefix_is_invalid(self):
        assert validate_api_key("abc123") is False

    def test_key_with_prefix_is_valid(self):
        assert validate_api_key("sk-abc123") is True


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "API_PORT", "OPENAI_MODEL", "LLM_MAX_TOKENS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_port == 5000
        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.llm_max_tokens == 500

    def test_port_env_var(self, monkeypatch):
        monkeypatch.delenv("API_PORT", raising=False)
        monkeypatch.setenv("PORT", "8080")

        assert Settings(_env_file=None).api_port == 8080

    def test_cors_origins_from_plain_string(self):
        settings = Settings(_env_file=None, cors_origins="http://localhost:3000")
        assert settings.cors_origins == ["http://localhost:3000"]

    def test_cors_origins_from_json_string(self):
        settings = Settings(_env_file=None, cors_origins='["http://a.test", "http://b.test"]')
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_settings_are_immutable(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.openai_model = "other"
