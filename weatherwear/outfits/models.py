from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from ..weather.models import WeatherCondition


class OutfitPostRequest(BaseModel):
    title: str = Field(default="", max_length=120)
    items: list[str] = Field(..., min_length=1, description="Names of the pieces worn")
    description: str = Field(default="", max_length=2000)
    tags: list[str] = Field(default_factory=list)
    weather: WeatherCondition | None = None
    temperature: float | None = None
    location: str = ""
    image_url: str = ""

    @field_validator("items")
    @classmethod
    def _strip_items(cls, value: list[str]) -> list[str]:
        items = [i.strip() for i in value if i.strip()]
        if not items:
            raise ValueError("at least one clothing item is required")
        return items


class OutfitPost(BaseModel):
    id: str
    user_id: str
    user_name: str
    title: str = ""
    items: list[str]
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    weather: WeatherCondition | None = None
    temperature: float | None = None
    location: str = ""
    image_url: str = ""
    created_at: datetime
    likes: int = 0
    liked_by: list[str] = Field(default_factory=list, exclude=True)


class LikeResponse(BaseModel):
    id: str
    likes: int
    liked: bool
