"""Weather plugin backed by the Japan Meteorological Agency forecast feed."""

from __future__ import annotations

import logging
import types

from tenki_chat.llm._async_http import async_get_text
from tenki_chat.llm._http import get_text
from tenki_chat.tools._decorator import tool
from tenki_chat.tools._registry import ToolError, ToolRegistry

logger = logging.getLogger(__name__)

FORECAST_BASE_URL = "https://www.jma.go.jp/bosai/forecast/data/forecast"

PLACE_CODES: types.MappingProxyType[str, int] = types.MappingProxyType(
    {
        "東京": 130000,
        "横浜": 140000,
        "名古屋": 230000,
        "京都": 260000,
        "静岡": 220000,
        "福井": 180000,
        "新潟": 150000,
        "富山": 160000,
        "金沢": 170000,
        "岐阜": 210000,
        "長野": 200000,
        "高山": 190000,
        "松本": 200000,
        "大津": 250000,
        "大阪": 270000,
        "札幌": 16000,
        "仙台": 40000,
        "福岡": 400000,
        "那覇": 471000,
    }
)

PLACE_ID_DESCRIPTION = "\n".join(
    [
        "天気を取得する場所コードを取得します。",
        "対応している場所コードは下記のとおりです。",
        "下記に含まれない場所の場合は近くの場所の天気を代わりに取得してください。",
        *PLACE_CODES,
    ]
)
WEATHER_DESCRIPTION = "場所コードの地域の天気を返す"
_CODE_PARAM: dict[str, dict[str, object]] = {"place": {"description": "場所コード"}}


class UnsupportedRegionError(ToolError, ValueError):
    """Raised when a place name has no region code."""

    def __init__(self, place: str) -> None:
        self.place = place
        super().__init__(f"対応していない地域です。({place})")


@tool(
    name="get_place_id",
    description=PLACE_ID_DESCRIPTION,
    schema={"place": {"description": "天気を取得する場所"}},
)
def resolve_place_code(place: str) -> int:
    """Return the region code for ``place`` (exact, case-sensitive match)."""
    try:
        return PLACE_CODES[place]
    except KeyError:
        raise UnsupportedRegionError(place) from None


def forecast_url(code: int, base_url: str = FORECAST_BASE_URL) -> str:
    """Build the forecast document URL for a region code.

    Codes are zero-padded to six digits, so 札幌 (16000) maps to ``016000.json``.
    """
    return f"{base_url.rstrip('/')}/{code:06d}.json"


def fetch_forecast(
    code: int, *, base_url: str = FORECAST_BASE_URL, timeout: float | None = None
) -> str:
    """Fetch the raw forecast JSON document for a region code."""
    return get_text(forecast_url(code, base_url), timeout=timeout)


async def async_fetch_forecast(
    code: int, *, base_url: str = FORECAST_BASE_URL, timeout: float | None = None
) -> str:
    """Async variant of :func:`fetch_forecast`."""
    return await async_get_text(forecast_url(code, base_url), timeout=timeout)


class WeatherPlugin:
    """Exposes place-code lookup and forecast retrieval as model tools.

    The tools are registered as ``get_place_id`` and ``weather``. With
    ``use_async=True`` the forecast fetch uses ``httpx`` and must be awaited,
    so that registry only works with :meth:`ChatSession.async_run_turn`;
    :meth:`ToolRegistry.execute` refuses it with ``TypeError``.
    """

    def __init__(
        self, *, base_url: str = FORECAST_BASE_URL, timeout: float | None = None
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout

    @tool(name="weather", description=WEATHER_DESCRIPTION, schema=_CODE_PARAM)
    def weather(self, place: int) -> str:
        # The parameter keeps the name the model sees; it carries a region code.
        return fetch_forecast(place, base_url=self.base_url, timeout=self.timeout)

    @tool(name="weather", description=WEATHER_DESCRIPTION, schema=_CODE_PARAM)
    async def aweather(self, place: int) -> str:
        return await async_fetch_forecast(place, base_url=self.base_url, timeout=self.timeout)

    def register(self, registry: ToolRegistry, *, use_async: bool = False) -> ToolRegistry:
        """Add both weather tools to ``registry`` and return it."""
        registry.register("get_place_id", resolve_place_code, resolve_place_code.__tool__)
        forecast = self.aweather if use_async else self.weather
        registry.register("weather", forecast, forecast.__tool__)
        logger.debug("Registered weather tools (async=%s)", use_async)
        return registry
