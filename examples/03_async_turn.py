"""03 — Async turn.

Run one turn with AsyncClient; the forecast is fetched with httpx.
"""

import asyncio

from tenki_chat import AsyncClient, ChatSession, Settings, ToolRegistry, WeatherPlugin


async def main() -> None:
    settings = Settings.from_env()
    registry = WeatherPlugin().register(ToolRegistry(), use_async=True)
    session = ChatSession(AsyncClient(settings), registry)
    print("Assistant:", await session.async_run_turn("札幌と福岡の天気を比べて"))


asyncio.run(main())
