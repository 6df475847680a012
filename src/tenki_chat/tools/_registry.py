"""Dispatch table mapping tool names to callables and their definitions."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from collections.abc import Callable
from typing import Any

from tenki_chat.llm._types import Tool, ToolCall

logger = logging.getLogger(__name__)


class ToolError(Exception):
    """A failure the model can recover from, reported back to it as the tool result."""


class ValidationError(ToolError):
    """Raised when tool arguments fail validation."""


class UnknownToolError(KeyError):
    """Raised when the model calls a function that is not registered."""


_SCHEMA_TYPE_TO_PYTHON: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


def _validate_args(tool_def: Tool, arguments: dict[str, object]) -> None:
    """Validate arguments against a tool's parameter schema."""
    params = tool_def.parameters
    required = params.get("required", [])
    properties = params.get("properties", {})

    if isinstance(required, list):
        for key in required:
            if key not in arguments:
                msg = f"Missing required argument '{key}' for tool '{tool_def.name}'"
                raise ValidationError(msg)

    if isinstance(properties, dict):
        for key, value in arguments.items():
            prop_schema = properties.get(key)
            if not isinstance(prop_schema, dict):
                msg = f"Unexpected argument '{key}' for tool '{tool_def.name}'"
                raise ValidationError(msg)
            schema_type = prop_schema.get("type")
            if not isinstance(schema_type, str):
                continue
            expected = _SCHEMA_TYPE_TO_PYTHON.get(schema_type)
            if expected is None:
                continue
            # bool is an int subclass; only accept it where a boolean is declared
            if not isinstance(value, expected) or (
                isinstance(value, bool) and schema_type != "boolean"
            ):
                msg = (
                    f"Argument '{key}' for tool '{tool_def.name}' "
                    f"expected {schema_type}, got "
                    f"{type(value).__name__}"
                )
                raise ValidationError(msg)


def _to_text(result: Any) -> str:
    return result if isinstance(result, str) else json.dumps(result, ensure_ascii=False)


class ToolRegistry:
    """Registry that maps tool names to callables and their LLM-compatible schemas."""

    def __init__(self) -> None:
        self._callables: dict[str, Callable[..., Any]] = {}
        self._definitions: dict[str, Tool] = {}

    def register(self, name: str, fn: Callable[..., Any], tool_def: Tool) -> None:
        """Register a callable with its tool definition."""
        if tool_def.name != name:
            raise ValueError(f"Definition name {tool_def.name!r} does not match {name!r}")
        self._callables[name] = fn
        self._definitions[name] = tool_def

    def _lookup(self, tool_call: ToolCall) -> Callable[..., Any]:
        fn = self._callables.get(tool_call.name)
        if fn is None:
            raise UnknownToolError(f"Unknown tool: {tool_call.name!r}")
        _validate_args(self._definitions[tool_call.name], tool_call.arguments)
        logger.debug("Calling tool %s with %s", tool_call.name, tool_call.arguments)
        return fn

    def execute(self, tool_call: ToolCall) -> str:
        """Execute a tool call synchronously, returning its result as text.

        Coroutine functions are rejected; they need :meth:`async_execute`.
        """
        fn = self._lookup(tool_call)
        if inspect.iscoroutinefunction(fn):
            raise TypeError(f"Tool {tool_call.name!r} is async; use async_execute()")
        return _to_text(fn(**tool_call.arguments))

    async def async_execute(self, tool_call: ToolCall) -> str:
        """Execute a tool call asynchronously, returning its result as text.

        Plain functions run in a worker thread.
        """
        fn = self._lookup(tool_call)
        if inspect.iscoroutinefunction(fn):
            result = await fn(**tool_call.arguments)
        else:
            result = await asyncio.to_thread(fn, **tool_call.arguments)
        return _to_text(result)

    def definitions(self) -> list[Tool]:
        """Return registered tool definitions (for passing to LLM context)."""
        return list(self._definitions.values())

    def __contains__(self, name: str) -> bool:
        return name in self._callables

    def __len__(self) -> int:
        return len(self._callables)
