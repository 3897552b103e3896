"""
Tests for client configuration.
"""
import pytest
from pydantic import ValidationError

from groqapi import GroqConfig
from groqapi.exceptions import GroqConfigError


def test_defaults():
    config = GroqConfig(api_key="k")

    assert config.base_url == "https://api.groq.com/openai/v1"
    assert config.max_base64_size_mb == 4
    assert config.timeout == 60.0


def test_full_url():
    config = GroqConfig(api_key="k", base_url="https://example.com/v1/")

    assert config.full_url("/chat/completions") == "https://example.com/v1/chat/completions"


def test_config_is_immutable():
    config = GroqConfig(api_key="k")

    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_api_key_not_in_repr():
    assert "secret-key" not in repr(GroqConfig(api_key="secret-key"))


def test_empty_api_key_rejected():
    with pytest.raises(ValidationError):
        GroqConfig(api_key="")


def test_from_env(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "env-key")
    monkeypatch.setenv("GROQ_BASE_URL", "http://localhost:8080/v1")

    config = GroqConfig.from_env(timeout=5)

    assert config.api_key == "env-key"
    assert config.base_url == "http://localhost:8080/v1"
    assert config.timeout == 5


def test_from_env_explicit_key_wins(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "env-key")

    assert GroqConfig.from_env(api_key="explicit").api_key == "explicit"


def test_from_env_without_key(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)

    with pytest.raises(GroqConfigError, match="GROQ_API_KEY"):
        GroqConfig.from_env()
