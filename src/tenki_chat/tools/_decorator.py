"""@tool decorator for building Tool definitions from type hints."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, get_type_hints, overload

from tenki_chat.llm._types import Tool

_PYTHON_TYPE_TO_JSON: dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
}


def _hint_to_json_schema(hint: Any) -> dict[str, object]:
    """Map a scalar type hint to a JSON Schema type; anything else is a string."""
    return {"type": _PYTHON_TYPE_TO_JSON.get(hint, "string")}


def _build_tool_def(
    fn: Callable[..., Any],
    name: str,
    description: str | None = None,
    schema_overrides: dict[str, dict[str, object]] | None = None,
) -> Tool:
    """Build a Tool definition from a function's signature and type hints.

    Without an explicit ``description`` the docstring is used as-is.
    """
    try:
        hints = get_type_hints(fn)
    except Exception:
        hints = getattr(fn, "__annotations__", {})
    sig = inspect.signature(fn)
    properties: dict[str, object] = {}
    required: list[str] = []
    for param_name, param in sig.parameters.items():
        if param_name in ("self", "cls"):
            continue
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            continue
        schema = _hint_to_json_schema(hints.get(param_name))
        if schema_overrides and param_name in schema_overrides:
            schema = {**schema, **schema_overrides[param_name]}
        properties[param_name] = schema
        if param.default is inspect.Parameter.empty:
            required.append(param_name)

    parameters: dict[str, object] = {
        "type": "object",
        "properties": properties,
        "required": required,
    }
    if description is None:
        description = inspect.getdoc(fn) or ""
    return Tool(name=name, description=description, parameters=parameters)


@overload
def tool(fn: Callable[..., Any], /) -> Callable[..., Any]: ...


@overload
def tool(
    *,
    name: str | None = None,
    description: str | None = None,
    schema: dict[str, dict[str, object]] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]: ...


def tool(
    fn: Callable[..., Any] | None = None,
    /,
    *,
    name: str | None = None,
    description: str | None = None,
    schema: dict[str, dict[str, object]] | None = None,
) -> Callable[..., Any] | Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that attaches a Tool definition as ``__tool__``.

    Can be used bare (``@tool``) or with arguments. ``schema`` merges extra
    JSON Schema keys (typically ``description``) into individual parameters.
    Keyword-only parameters are not exposed to the model.
    """

    def _wrap(f: Callable[..., Any]) -> Callable[..., Any]:
        tool_name = name or f.__name__
        tool_def = _build_tool_def(f, tool_name, description, schema)

        if inspect.iscoroutinefunction(f):

            @functools.wraps(f)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await f(*args, **kwargs)

            async_wrapper.__tool__ = tool_def  # type: ignore[attr-defined]
            return async_wrapper

        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return f(*args, **kwargs)

        wrapper.__tool__ = tool_def  # type: ignore[attr-defined]
        return wrapper

    if fn is not None:
        return _wrap(fn)
    return _wrap
