"""Chat loop that resolves tool calls between the model and local functions."""

from tenki_chat.chat._session import ChatConfig, ChatSession, ToolLoopError

__all__ = ["ChatConfig", "ChatSession", "ToolLoopError"]
