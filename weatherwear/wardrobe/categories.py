from __future__ import annotations

import re

# Weather-oriented wardrobe categories, in the order the rule engine
# consults them. Keys are the ids clients send; values are display labels.
CATEGORIES: dict[str, str] = {
    "winter_wear": "Winter wear",
    "cold_weather_gear": "Cold-weather gear",
    "autumn_winter_wear": "Autumn/winter wear",
    "jacket": "Jacket",
    "spring_autumn_wear": "Spring/autumn wear",
    "cardigan": "Cardigan",
    "spring_summer_wear": "Spring/summer wear",
    "summer_wear": "Summer wear",
    "t_shirt": "T-shirt",
    "raincoat": "Raincoat",
    "rain_boots": "Rain boots",
    "snow_boots": "Snow boots",
    "gloves": "Gloves",
    "sunglasses": "Sunglasses",
    "hat": "Hat",
    "windbreaker": "Windbreaker",
    "breathable": "Breathable",
}

_SEPARATORS = re.compile(r"[\s\-/]+")


def normalize_category(value: str) -> str:
    """``"Rain Boots"`` and ``"rain-boots"`` both become ``"rain_boots"``."""
    return _SEPARATORS.sub("_", value.strip().lower())


def is_valid_category(value: str) -> bool:
    return normalize_category(value) in CATEGORIES


def list_categories() -> list[dict[str, str]]:
    return [{"id": cid, "name": label} for cid, label in CATEGORIES.items()]
