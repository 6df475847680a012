"""Message and tool types exchanged with the chat completions endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool call returned by the model."""

    id: str
    name: str
    arguments: dict[str, object]


@dataclass(frozen=True, slots=True)
class Message:
    """A chat message."""

    role: str
    content: str = ""
    tool_calls: tuple[ToolCall, ...] = ()


@dataclass(frozen=True, slots=True)
class ToolResult:
    """A tool result sent back to the model after executing a tool call."""

    tool_call_id: str
    name: str
    content: str


@dataclass(frozen=True, slots=True)
class Tool:
    """A tool/function definition passed to the model.

    The description is sent verbatim, so it doubles as the instructions the
    model follows when deciding whether and how to call the tool.
    """

    name: str
    description: str
    parameters: dict[str, object]


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Response:
    """A parsed chat completion."""

    text: str = ""
    tool_calls: tuple[ToolCall, ...] = ()
    usage: Usage = field(default_factory=Usage)
    stop_reason: str = ""

    def to_message(self) -> Message:
        """Convert this response to a Message suitable for multi-turn conversations."""
        return Message(role="assistant", content=self.text, tool_calls=self.tool_calls)


ConversationItem: TypeAlias = Message | ToolResult
