"""Shared test fixtures."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from tenki_chat._config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        endpoint="https://example.openai.azure.com/",
        deployment="gpt-4o",
        api_key="test-key",
    )


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json / get_text."""

    def __init__(
        self,
        json_data: dict[str, Any] | None = None,
        status_code: int = 200,
        text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300
        self.headers: dict[str, str] = headers or {}

    def json(self) -> dict[str, Any]:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


@pytest.fixture
def mock_get(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.get`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.get", mock)
    return mock
