"""Tests for _http.py helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tenki_chat.llm._exceptions import APIError
from tenki_chat.llm._http import get_text, post_json
from tests.conftest import MockResponse


def test_post_json_success(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={"result": "ok"})
    result = post_json("https://example.com", {"api-key": "key"}, {"q": "test"})
    assert result == {"result": "ok"}
    mock_post.assert_called_once()


def test_post_json_default_timeout_is_none(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={})
    post_json("https://example.com", {}, {})
    assert mock_post.call_args.kwargs["timeout"] is None


def test_post_json_api_error(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={"error": "bad"}, status_code=400)
    with pytest.raises(APIError) as exc_info:
        post_json("https://example.com", {}, {})
    assert exc_info.value.status_code == 400
    assert exc_info.value.body == {"error": "bad"}


def test_post_json_api_error_non_json(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(status_code=500, text="Internal Server Error")
    with pytest.raises(APIError) as exc_info:
        post_json("https://example.com", {}, {})
    assert exc_info.value.status_code == 500
    assert exc_info.value.body == "Internal Server Error"


def test_post_json_sends_one_request_on_error(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={"error": "busy"}, status_code=503)
    with pytest.raises(APIError):
        post_json("https://example.com", {}, {})
    assert mock_post.call_count == 1


def test_post_json_rate_limit_is_api_error(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(
        json_data={"error": "limited"}, status_code=429, headers={"Retry-After": "2"}
    )
    with pytest.raises(APIError) as exc_info:
        post_json("https://example.com", {}, {})
    assert exc_info.value.status_code == 429
    assert mock_post.call_count == 1


def test_get_text_returns_body(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(text='[{"publishingOffice": "気象庁"}]')
    body = get_text("https://example.com/130000.json")
    assert body == '[{"publishingOffice": "気象庁"}]'
    mock_get.assert_called_once_with("https://example.com/130000.json", timeout=None)


def test_get_text_error(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(status_code=404, text="Not Found")
    with pytest.raises(APIError) as exc_info:
        get_text("https://example.com/999999.json")
    assert exc_info.value.status_code == 404

