from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class WeatherConfig:
    api_key: str = os.getenv("WEATHER_API_KEY", "")
    base_url: str = os.getenv("WEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5")
    units: str = "metric"
    timeout: float = float(os.getenv("WEATHER_TIMEOUT", "10"))
    cache_ttl: float = float(os.getenv("WEATHER_CACHE_TTL", "600"))


DEFAULT_WEATHER_CONFIG = WeatherConfig()
