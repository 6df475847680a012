"""Console entry point: ``User > `` / ``Assistant > `` read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from tenki_chat._config import ConfigError, Settings
from tenki_chat.chat._session import ChatConfig, ChatSession
from tenki_chat.llm._client import Client
from tenki_chat.plugins._weather import WeatherPlugin
from tenki_chat.tools._registry import ToolRegistry

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def build_session(settings: Settings) -> ChatSession:
    """Wire a client, the weather tools and the generation options together."""
    registry = WeatherPlugin(timeout=settings.timeout).register(ToolRegistry())
    config = ChatConfig(max_tokens=settings.max_tokens, temperature=settings.temperature)
    return ChatSession(Client(settings), registry, config=config)


def run_repl(
    session: ChatSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read lines until empty input, ``exit`` or EOF, printing each reply."""
    while True:
        try:
            text = read("User > ")
        except EOFError:
            break
        if not text or text == EXIT_COMMAND:
            break
        reply = session.run_turn(text)
        write(f"Assistant > {reply}")


def main() -> int:
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Using deployment %s at %s", settings.deployment, settings.endpoint)

    run_repl(build_session(settings))
    return 0
