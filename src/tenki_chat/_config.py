"""Settings loaded once at startup and passed to the components that need them."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from dotenv import load_dotenv

from tenki_chat.llm._azure_openai import DEFAULT_API_VERSION

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} is not set.")
    return value


def _parse(environ: Mapping[str, str], name: str, kind: type, default: object) -> object:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"{name} must be {kind.__name__}, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    """Connection and generation settings for one chat session."""

    endpoint: str
    deployment: str
    api_key: str | None = field(default=None, repr=False)
    ad_token: str | None = field(default=None, repr=False)
    api_version: str = DEFAULT_API_VERSION
    max_tokens: int = 2000
    temperature: float = 1.0
    timeout: float | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, *, dotenv: bool = True
    ) -> Settings:
        """Build settings from environment variables.

        When ``environ`` is omitted, a ``.env`` file in the working directory
        (if any) is loaded first; real environment variables take precedence.
        """
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ

        endpoint = _required(environ, "AZURE_OPENAI_ENDPOINT")
        deployment = _required(environ, "AZURE_OPENAI_DEPLOYMENT")
        api_key = environ.get("AZURE_OPENAI_API_KEY", "").strip() or None
        ad_token = environ.get("AZURE_OPENAI_AD_TOKEN", "").strip() or None
        if api_key is None and ad_token is None:
            raise ConfigError("AZURE_OPENAI_API_KEY or AZURE_OPENAI_AD_TOKEN is not set.")

        log_level = environ.get("TENKI_CHAT_LOG_LEVEL", "").strip().upper() or "WARNING"
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"TENKI_CHAT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        return cls(
            endpoint=endpoint,
            deployment=deployment,
            api_key=api_key,
            ad_token=ad_token,
            api_version=environ.get("AZURE_OPENAI_API_VERSION", "").strip()
            or DEFAULT_API_VERSION,
            max_tokens=_parse(environ, "TENKI_CHAT_MAX_TOKENS", int, 2000),  # type: ignore[arg-type]
            temperature=_parse(environ, "TENKI_CHAT_TEMPERATURE", float, 1.0),  # type: ignore[arg-type]
            timeout=_parse(environ, "TENKI_CHAT_TIMEOUT", float, None),  # type: ignore[arg-type]
            log_level=log_level,
        )
