"""Tests for Settings.from_env."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tenki_chat._config import ConfigError, Settings

_BASE_ENV = {
    "AZURE_OPENAI_ENDPOINT": "https://example.openai.azure.com",
    "AZURE_OPENAI_DEPLOYMENT": "gpt-4o",
    "AZURE_OPENAI_API_KEY": "secret",
}


def test_defaults():
    s = Settings.from_env(_BASE_ENV)
    assert s.endpoint == "https://example.openai.azure.com"
    assert s.deployment == "gpt-4o"
    assert s.api_key == "secret"
    assert s.ad_token is None
    assert s.api_version == "2024-10-21"
    assert s.max_tokens == 2000
    assert s.temperature == 1.0
    assert s.timeout is None
    assert s.log_level == "WARNING"


def test_overrides():
    env = {
        **_BASE_ENV,
        "AZURE_OPENAI_API_VERSION": "2024-06-01",
        "TENKI_CHAT_MAX_TOKENS": "500",
        "TENKI_CHAT_TEMPERATURE": "0.2",
        "TENKI_CHAT_TIMEOUT": "30",
        "TENKI_CHAT_LOG_LEVEL": "debug",
    }
    s = Settings.from_env(env)
    assert s.api_version == "2024-06-01"
    assert s.max_tokens == 500
    assert s.temperature == 0.2
    assert s.timeout == 30.0
    assert s.log_level == "DEBUG"


def test_ad_token_instead_of_key():
    env = {k: v for k, v in _BASE_ENV.items() if k != "AZURE_OPENAI_API_KEY"}
    s = Settings.from_env({**env, "AZURE_OPENAI_AD_TOKEN": "tok"})
    assert s.api_key is None
    assert s.ad_token == "tok"


@pytest.mark.parametrize("missing", ["AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_DEPLOYMENT"])
def test_missing_required(missing: str):
    env = {k: v for k, v in _BASE_ENV.items() if k != missing}
    with pytest.raises(ConfigError, match=missing):
        Settings.from_env(env)


def test_blank_value_counts_as_missing():
    with pytest.raises(ConfigError, match="AZURE_OPENAI_DEPLOYMENT"):
        Settings.from_env({**_BASE_ENV, "AZURE_OPENAI_DEPLOYMENT": "  "})


def test_missing_credential():
    env = {k: v for k, v in _BASE_ENV.items() if k != "AZURE_OPENAI_API_KEY"}
    with pytest.raises(ConfigError, match="AZURE_OPENAI_API_KEY or AZURE_OPENAI_AD_TOKEN"):
        Settings.from_env(env)


def test_malformed_number():
    with pytest.raises(ConfigError, match="TENKI_CHAT_MAX_TOKENS must be int"):
        Settings.from_env({**_BASE_ENV, "TENKI_CHAT_MAX_TOKENS": "lots"})


def test_bad_log_level():
    with pytest.raises(ConfigError, match="TENKI_CHAT_LOG_LEVEL"):
        Settings.from_env({**_BASE_ENV, "TENKI_CHAT_LOG_LEVEL": "TRACE"})


def test_credentials_not_in_repr():
    s = Settings.from_env({**_BASE_ENV, "AZURE_OPENAI_AD_TOKEN": "tok"})
    assert "secret" not in repr(s)
    assert "tok" not in repr(s)


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    for key, value in _BASE_ENV.items():
        monkeypatch.setenv(key, value)
    with patch("tenki_chat._config.load_dotenv") as mock_load:
        s = Settings.from_env()
    mock_load.assert_called_once_with()
    assert s.deployment == "gpt-4o"


def test_dotenv_can_be_skipped(monkeypatch: pytest.MonkeyPatch):
    for key, value in _BASE_ENV.items():
        monkeypatch.setenv(key, value)
    with patch("tenki_chat._config.load_dotenv") as mock_load:
        Settings.from_env(dotenv=False)
    mock_load.assert_not_called()
