from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    temperature: float = Field(..., description="Air temperature in Celsius")
    feels_like: float = 0.0
    description: str = ""
    condition: str = Field(default="", description='Provider group, e.g. "Rain" or "Clear"')
    humidity: int = Field(default=0, description="Relative humidity in percent")
    wind_speed: float = Field(default=0.0, description="Wind speed in m/s")
    cloud_cover: int = 0
    location: str = ""
    date_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
