"""
OpenWeatherMap integration.

Responsibilities:
- Fetch the current reading for a coordinate pair.
- Translate the provider payload into a ``WeatherCondition``.
- Serve repeated lookups from the TTL cache.
- Fall back to a fixed mock reading when no API key is configured.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from ..exceptions import WeatherServiceError
from .cache import cache_get, cache_set
from .config import DEFAULT_WEATHER_CONFIG, WeatherConfig
from .models import WeatherCondition

logger = logging.getLogger(__name__)

_mock_warned = False


def mock_weather(latitude: float, longitude: float) -> WeatherCondition:
    """A mild, dry, clear-sky reading used when no API key is set."""
    return WeatherCondition(
        temperature=20.0,
        feels_like=20.0,
        description="clear sky",
        condition="Clear",
        humidity=50,
        wind_speed=3.0,
        cloud_cover=0,
        location=f"Mock location ({latitude:.2f}, {longitude:.2f})",
    )


def _section(payload: dict, key: str) -> dict:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def parse_openweathermap(payload: Any) -> WeatherCondition:
    """Map a ``/data/2.5/weather`` response body onto ``WeatherCondition``.

    Absent or mistyped sections default to zero values; only a non-object
    body or non-numeric readings are rejected.
    """
    if not isinstance(payload, dict):
        raise WeatherServiceError("Weather API returned an unexpected body")

    main = _section(payload, "main")
    wind = _section(payload, "wind")
    clouds = _section(payload, "clouds")
    conditions = payload.get("weather")
    first = conditions[0] if isinstance(conditions, list) and conditions else {}
    if not isinstance(first, dict):
        first = {}

    dt = payload.get("dt")
    try:
        if isinstance(dt, (int, float)) and not isinstance(dt, bool):
            observed = datetime.fromtimestamp(dt, tz=timezone.utc)
        else:
            observed = datetime.now(timezone.utc)
        return WeatherCondition(
            temperature=float(main.get("temp", 0.0)),
            feels_like=float(main.get("feels_like", 0.0)),
            humidity=int(main.get("humidity", 0)),
            wind_speed=float(wind.get("speed", 0.0)),
            cloud_cover=int(clouds.get("all", 0)),
            condition=str(first.get("main", "")),
            description=str(first.get("description", "")),
            location=str(payload.get("name", "")),
            date_time=observed,
        )
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise WeatherServiceError("Weather API returned malformed values") from exc


def get_current_weather(
    latitude: float,
    longitude: float,
    config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> WeatherCondition:
    """Return the current reading at ``(latitude, longitude)``.

    Raises ``WeatherServiceError`` when the provider cannot be reached,
    answers with a non-200 status, or sends a body that is not JSON.
    """
    global _mock_warned
    if not config.api_key:
        if not _mock_warned:
            logger.warning("WEATHER_API_KEY not set, using mock weather data")
            _mock_warned = True
        return mock_weather(latitude, longitude)

    cached = cache_get(latitude, longitude, ttl=config.cache_ttl)
    if cached is not None:
        return cached

    try:
        response = httpx.get(
            f"{config.base_url.rstrip('/')}/weather",
            params={
                "lat": latitude,
                "lon": longitude,
                "appid": config.api_key,
                "units": config.units,
            },
            timeout=config.timeout,
        )
    except httpx.HTTPError as exc:
        logger.warning("Weather API request failed", exc_info=True)
        raise WeatherServiceError("Failed to fetch weather data") from exc

    if response.status_code != 200:
        logger.warning("Weather API returned status %s", response.status_code)
        raise WeatherServiceError(f"Weather API returned status {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise WeatherServiceError("Failed to decode weather response") from exc

    weather = parse_openweathermap(payload)
    cache_set(latitude, longitude, weather, ttl=config.cache_ttl)
    return weather
