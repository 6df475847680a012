"""Tool registry and decorator for functions exposed to the model."""

from tenki_chat.tools._decorator import tool
from tenki_chat.tools._registry import ToolError, ToolRegistry, UnknownToolError, ValidationError

__all__ = ["ToolError", "ToolRegistry", "UnknownToolError", "ValidationError", "tool"]
