"""Interactive chat session with automatic tool-call resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tenki_chat.llm._types import Message, Response, ToolCall, ToolResult
from tenki_chat.tools._registry import ToolError

logger = logging.getLogger(__name__)


class ToolLoopError(Exception):
    """Raised when one turn exceeds the allowed number of tool round trips."""


@dataclass(frozen=True, slots=True)
class ChatConfig:
    """Generation options sent with every request of a session."""

    system: str = ""
    max_tokens: int | None = 2000
    temperature: float | None = 1.0
    max_tool_rounds: int = 10


def _tool_result(tc: ToolCall, content: str) -> ToolResult:
    return ToolResult(tool_call_id=tc.id, name=tc.name, content=content)


class ChatSession:
    """Owns the conversation history and drives one turn at a time.

    Only user inputs and final assistant replies are kept in the history;
    tool calls and their results live for the duration of a single turn.
    Unknown tool names raise :class:`~tenki_chat.tools.UnknownToolError`.
    """

    def __init__(self, client: Any, tools: Any, *, config: ChatConfig | None = None) -> None:
        self.client = client
        self.tools = tools
        self.config = config or ChatConfig()
        self._history: list[Message] = []

    @property
    def history(self) -> tuple[Message, ...]:
        return tuple(self._history)

    def _chat_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "system": self.config.system or None,
            "tools": self.tools.definitions() or None,
        }
        if self.config.max_tokens is not None:
            kwargs["max_tokens"] = self.config.max_tokens
        if self.config.temperature is not None:
            kwargs["temperature"] = self.config.temperature
        return kwargs

    def _execute(self, tc: ToolCall) -> ToolResult:
        try:
            content = self.tools.execute(tc)
        except ToolError as exc:
            logger.warning("Tool %s failed: %s", tc.name, exc)
            return _tool_result(tc, f"Error: {exc}")
        logger.debug("Tool %s returned %d chars", tc.name, len(content))
        return _tool_result(tc, content)

    async def _async_execute(self, tc: ToolCall) -> ToolResult:
        try:
            content = await self.tools.async_execute(tc)
        except ToolError as exc:
            logger.warning("Tool %s failed: %s", tc.name, exc)
            return _tool_result(tc, f"Error: {exc}")
        logger.debug("Tool %s returned %d chars", tc.name, len(content))
        return _tool_result(tc, content)

    def _finish(self, response: Response, rounds: int) -> str:
        self._history.append(Message(role="assistant", content=response.text))
        logger.info("Turn completed after %d tool round(s)", rounds)
        logger.debug(
            "Usage: %d prompt + %d completion = %d tokens (%s)",
            response.usage.input_tokens,
            response.usage.output_tokens,
            response.usage.total_tokens,
            response.stop_reason or "unknown",
        )
        return response.text

    def run_turn(self, text: str) -> str:
        """Send ``text`` and return the final assistant reply."""
        self._history.append(Message(role="user", content=text))
        messages: list[Message | ToolResult] = list(self._history)
        try:
            for rounds in range(self.config.max_tool_rounds + 1):
                response: Response = self.client.chat(messages, **self._chat_kwargs())
                if not response.tool_calls:
                    return self._finish(response, rounds)
                messages.append(response.to_message())
                messages.extend(self._execute(tc) for tc in response.tool_calls)
            raise ToolLoopError(
                f"No final reply after {self.config.max_tool_rounds} tool round(s)"
            )
        except BaseException:
            self._history.pop()
            raise

    async def async_run_turn(self, text: str) -> str:
        """Async variant of :meth:`run_turn` for an ``AsyncClient``."""
        self._history.append(Message(role="user", content=text))
        messages: list[Message | ToolResult] = list(self._history)
        try:
            for rounds in range(self.config.max_tool_rounds + 1):
                response: Response = await self.client.chat(messages, **self._chat_kwargs())
                if not response.tool_calls:
                    return self._finish(response, rounds)
                messages.append(response.to_message())
                for tc in response.tool_calls:
                    messages.append(await self._async_execute(tc))
            raise ToolLoopError(
                f"No final reply after {self.config.max_tool_rounds} tool round(s)"
            )
        except BaseException:
            self._history.pop()
            raise
