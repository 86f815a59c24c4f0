from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .categories import CATEGORIES, normalize_category


class ClothingItemRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, description="One of the wardrobe category ids")
    color: str = Field(..., min_length=1, max_length=50)
    type: str = Field(default="", max_length=50, description="Free-text garment type, e.g. parka")
    brand: str = Field(default="", max_length=100)
    image_url: str = ""
    warmth_level: int | None = Field(default=None, ge=1, le=10)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        normalized = normalize_category(value)
        if normalized not in CATEGORIES:
            raise ValueError(f"unknown category {value!r}")
        return normalized


class ClothingItem(BaseModel):
    id: str
    user_id: str
    name: str
    type: str = ""
    color: str
    category: str
    brand: str = ""
    warmth_level: int | None = None
    image_url: str = ""
    created_at: datetime


class ClothingCategoryOut(BaseModel):
    id: str
    name: str
