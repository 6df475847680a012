"""tenki-chat — console chat client with a JMA weather lookup tool."""

from tenki_chat._config import ConfigError, Settings
from tenki_chat.chat import ChatConfig, ChatSession, ToolLoopError
from tenki_chat.llm import (
    APIError,
    AsyncClient,
    Client,
    Message,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)
from tenki_chat.plugins import UnsupportedRegionError, WeatherPlugin
from tenki_chat.tools import ToolError, ToolRegistry, UnknownToolError, ValidationError, tool

__all__ = [
    "APIError",
    "AsyncClient",
    "ChatConfig",
    "ChatSession",
    "Client",
    "ConfigError",
    "Message",
    "Response",
    "Settings",
    "Tool",
    "ToolCall",
    "ToolError",
    "ToolLoopError",
    "ToolRegistry",
    "ToolResult",
    "UnknownToolError",
    "UnsupportedRegionError",
    "Usage",
    "ValidationError",
    "WeatherPlugin",
    "tool",
]
