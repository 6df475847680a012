"""LLM client for Azure OpenAI chat completions."""

from tenki_chat.llm._azure_openai import AzureOpenAIProvider
from tenki_chat.llm._client import AsyncClient, Client
from tenki_chat.llm._exceptions import APIError
from tenki_chat.llm._types import (
    ConversationItem,
    Message,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)

__all__ = [
    "APIError",
    "AsyncClient",
    "AzureOpenAIProvider",
    "Client",
    "ConversationItem",
    "Message",
    "Response",
    "Tool",
    "ToolCall",
    "ToolResult",
    "Usage",
]
