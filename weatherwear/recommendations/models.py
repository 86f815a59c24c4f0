from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..weather.models import WeatherCondition


class RecommendationRequest(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    location: str = Field(default="", max_length=200, description="Display name for the place")


class RecommendedItem(BaseModel):
    item_id: str
    category: str
    name: str
    color: str
    reason: str


class FashionRecommendation(BaseModel):
    id: str = ""
    user_id: str = ""
    style: str
    items: list[RecommendedItem]
    weather: WeatherCondition
    reason: str
    location: str = ""
    created_at: datetime | None = None
