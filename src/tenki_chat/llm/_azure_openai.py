"""Provider for Azure OpenAI chat completions deployments."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tenki_chat.llm._async_http import async_post_json
from tenki_chat.llm._http import post_json
from tenki_chat.llm._types import (
    ConversationItem,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)

if TYPE_CHECKING:
    from tenki_chat._config import Settings

DEFAULT_API_VERSION = "2024-10-21"


def _tool_to_openai(tool: Tool) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.parameters,
        },
    }


def _parse_tool_args(raw_args: str | dict[str, Any]) -> dict[str, Any]:
    if isinstance(raw_args, dict):
        return raw_args
    try:
        parsed = json.loads(raw_args)
    except (json.JSONDecodeError, TypeError):
        return {"_raw": raw_args}
    # Non-object JSON ("null", "5") is left for argument validation to reject.
    if not isinstance(parsed, dict):
        return {"_raw": raw_args}
    return parsed


def _parse_response(raw: dict[str, Any]) -> Response:
    choices = raw.get("choices", [])
    if not choices:
        return Response()

    choice = choices[0]
    message = choice.get("message", {})
    text = message.get("content") or ""

    tool_calls: list[ToolCall] = []
    for tc in message.get("tool_calls") or []:
        fn = tc.get("function", {})
        tool_calls.append(
            ToolCall(
                id=tc.get("id", ""),
                name=fn.get("name", ""),
                arguments=_parse_tool_args(fn.get("arguments", "{}")),
            )
        )

    raw_usage = raw.get("usage") or {}
    usage = Usage(
        input_tokens=raw_usage.get("prompt_tokens", 0),
        output_tokens=raw_usage.get("completion_tokens", 0),
        total_tokens=raw_usage.get("total_tokens", 0),
    )

    return Response(
        text=text,
        tool_calls=tuple(tool_calls),
        usage=usage,
        stop_reason=choice.get("finish_reason") or "",
    )


def _message_to_wire(item: ConversationItem) -> dict[str, Any]:
    """Convert a ConversationItem to the chat completions wire format dict."""
    if isinstance(item, ToolResult):
        return {
            "role": "tool",
            "tool_call_id": item.tool_call_id,
            "content": item.content,
        }
    # Assistant turn that requested tools
    if item.tool_calls:
        return {
            "role": item.role,
            "content": item.content or None,
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {
                        "name": tc.name,
                        "arguments": json.dumps(tc.arguments, ensure_ascii=False),
                    },
                }
                for tc in item.tool_calls
            ],
        }
    return {"role": item.role, "content": item.content}


class AzureOpenAIProvider:
    """Sends chat completion requests to a single Azure OpenAI deployment.

    Exactly one of ``api_key`` (sent as the ``api-key`` header) or
    ``ad_token`` (sent as a bearer token) must be given.
    """

    def __init__(
        self,
        endpoint: str,
        deployment: str,
        *,
        api_key: str | None = None,
        ad_token: str | None = None,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float | None = None,
    ) -> None:
        if not api_key and not ad_token:
            raise ValueError("Either api_key or ad_token is required.")
        self._url = (
            f"{endpoint.rstrip('/')}/openai/deployments/{deployment}"
            f"/chat/completions?api-version={api_version}"
        )
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["api-key"] = api_key
        else:
            self._headers["Authorization"] = f"Bearer {ad_token}"
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> AzureOpenAIProvider:
        return cls(
            settings.endpoint,
            settings.deployment,
            api_key=settings.api_key,
            ad_token=settings.ad_token,
            api_version=settings.api_version,
            timeout=settings.timeout,
        )

    @property
    def url(self) -> str:
        return self._url

    def _build_payload(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        msgs: list[dict[str, Any]] = []
        if system:
            msgs.append({"role": "system", "content": system})
        msgs.extend(_message_to_wire(m) for m in messages)

        # The deployment name in the URL selects the model; no "model" key.
        payload: dict[str, Any] = {"messages": msgs, **kwargs}
        if tools:
            payload["tools"] = [_tool_to_openai(t) for t in tools]
            payload.setdefault("tool_choice", "auto")
        return payload

    def complete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        payload = self._build_payload(messages, system=system, tools=tools, **kwargs)
        raw = post_json(self._url, self._headers, payload, timeout=self._timeout)
        return _parse_response(raw)

    async def acomplete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        payload = self._build_payload(messages, system=system, tools=tools, **kwargs)
        raw = await async_post_json(self._url, self._headers, payload, timeout=self._timeout)
        return _parse_response(raw)
