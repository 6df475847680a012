"""Client — the main user-facing entry point."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from tenki_chat.llm._azure_openai import AzureOpenAIProvider
from tenki_chat.llm._types import ConversationItem, Message, Response, Tool, ToolResult

if TYPE_CHECKING:
    from tenki_chat._config import Settings


def _normalize_input(
    prompt_or_messages: str | Sequence[dict[str, str] | Message | ToolResult],
) -> list[ConversationItem]:
    if isinstance(prompt_or_messages, str):
        return [Message(role="user", content=prompt_or_messages)]
    items: list[ConversationItem] = []
    for m in prompt_or_messages:
        if isinstance(m, (Message, ToolResult)):
            items.append(m)
        else:
            items.append(Message(role=m["role"], content=m["content"]))
    return items


class Client:
    """Synchronous chat client bound to one Azure OpenAI deployment.

    Usage::

        from tenki_chat import Client, Settings

        client = Client(Settings.from_env())
        response = client.chat("こんにちは")
        print(response.text)
    """

    def __init__(self, settings: Settings) -> None:
        self._provider = AzureOpenAIProvider.from_settings(settings)

    def chat(
        self,
        prompt_or_messages: str | Sequence[dict[str, str] | Message | ToolResult],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Send a chat request and return the parsed Response."""
        messages = _normalize_input(prompt_or_messages)
        return self._provider.complete(messages, system=system, tools=tools, **kwargs)


class AsyncClient:
    """Async counterpart of :class:`Client` (uses ``httpx``)."""

    def __init__(self, settings: Settings) -> None:
        self._provider = AzureOpenAIProvider.from_settings(settings)

    async def chat(
        self,
        prompt_or_messages: str | Sequence[dict[str, str] | Message | ToolResult],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Send a chat request asynchronously and return the parsed Response."""
        messages = _normalize_input(prompt_or_messages)
        return await self._provider.acomplete(messages, system=system, tools=tools, **kwargs)
