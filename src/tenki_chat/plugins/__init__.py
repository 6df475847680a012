"""Plugins that expose local functions to the model."""

from tenki_chat.plugins._weather import (
    FORECAST_BASE_URL,
    PLACE_CODES,
    UnsupportedRegionError,
    WeatherPlugin,
    async_fetch_forecast,
    fetch_forecast,
    forecast_url,
    resolve_place_code,
)

__all__ = [
    "FORECAST_BASE_URL",
    "PLACE_CODES",
    "UnsupportedRegionError",
    "WeatherPlugin",
    "async_fetch_forecast",
    "fetch_forecast",
    "forecast_url",
    "resolve_place_code",
]
