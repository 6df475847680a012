"""Tests for Client and AsyncClient."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

from tenki_chat.llm._client import AsyncClient, Client
from tenki_chat.llm._types import Message, Response, ToolResult, Usage


def _mock_provider() -> MagicMock:
    provider = MagicMock()
    provider.complete = MagicMock(return_value=Response(text="Hi!", usage=Usage(10, 5, 15)))
    provider.acomplete = AsyncMock(return_value=Response(text="Hi async!"))
    return provider


@patch("tenki_chat.llm._client.AzureOpenAIProvider.from_settings")
def test_chat_string(mock_from_settings: MagicMock, settings) -> None:
    mock_from_settings.return_value = _mock_provider()
    client = Client(settings)
    resp = client.chat("Hello!")

    assert resp.text == "Hi!"
    messages = mock_from_settings.return_value.complete.call_args[0][0]
    assert messages == [Message(role="user", content="Hello!")]


@patch("tenki_chat.llm._client.AzureOpenAIProvider.from_settings")
def test_chat_mixed_items(mock_from_settings: MagicMock, settings) -> None:
    mock_from_settings.return_value = _mock_provider()
    client = Client(settings)
    result = ToolResult(tool_call_id="c1", name="weather", content="{}")
    client.chat([{"role": "user", "content": "Hi"}, Message("assistant", "Hello"), result])

    messages = mock_from_settings.return_value.complete.call_args[0][0]
    assert messages[0] == Message(role="user", content="Hi")
    assert messages[2] is result


@patch("tenki_chat.llm._client.AzureOpenAIProvider.from_settings")
def test_chat_forwards_options(mock_from_settings: MagicMock, settings) -> None:
    mock_from_settings.return_value = _mock_provider()
    Client(settings).chat("Hi", system="Be helpful", temperature=1.0)

    call_kwargs = mock_from_settings.return_value.complete.call_args[1]
    assert call_kwargs["system"] == "Be helpful"
    assert call_kwargs["temperature"] == 1.0


@patch("tenki_chat.llm._client.AzureOpenAIProvider.from_settings")
async def test_async_chat(mock_from_settings: MagicMock, settings) -> None:
    mock_from_settings.return_value = _mock_provider()
    resp = await AsyncClient(settings).chat("Hello!")
    assert resp.text == "Hi async!"
    mock_from_settings.return_value.acomplete.assert_awaited_once()
