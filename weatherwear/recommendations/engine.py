from __future__ import annotations

from dataclasses import dataclass

from ..wardrobe.categories import normalize_category
from ..wardrobe.models import ClothingItem
from ..weather.models import WeatherCondition
from .models import FashionRecommendation, RecommendedItem

WIND_THRESHOLD = 10.0  # m/s
HUMIDITY_THRESHOLD = 70  # percent
COLD_MAX = 10.0
HOT_MIN = 25.0

# Provider condition groups folded onto the three the rules care about.
_CONDITION_GROUPS: dict[str, str] = {
    "rain": "rain",
    "drizzle": "rain",
    "thunderstorm": "rain",
    "snow": "snow",
    "clear": "clear",
}


@dataclass(frozen=True)
class Rule:
    categories: tuple[str, ...]
    reason: str


# (upper bound inclusive, rule); the first band whose bound is >= t applies.
TEMPERATURE_BANDS: list[tuple[float, Rule]] = [
    (0.0, Rule(("winter_wear", "cold_weather_gear"), "Freezing temperatures call for heavy layers")),
    (10.0, Rule(("autumn_winter_wear", "jacket"), "Chosen for the cold weather")),
    (20.0, Rule(("spring_autumn_wear", "cardigan"), "A light layer for mild weather")),
    (25.0, Rule(("spring_summer_wear",), "Comfortable for warm weather")),
    (float("inf"), Rule(("summer_wear", "t_shirt"), "Chosen for the hot weather")),
]

CONDITION_RULES: dict[str, Rule] = {
    "rain": Rule(("raincoat", "rain_boots"), "Keeps you dry in the rain"),
    "snow": Rule(("snow_boots", "gloves"), "Protection against snow"),
    "clear": Rule(("sunglasses", "hat"), "Shade from the sun on a clear day"),
}

WIND_RULE = Rule(("windbreaker",), "Blocks the strong wind")
HUMIDITY_RULE = Rule(("breathable",), "Breathable fabric for humid air")


def normalize_condition(condition: str) -> str:
    """Fold ``Rain``/``Drizzle``/``Thunderstorm`` to ``rain`` and so on.

    Unknown conditions (``Clouds``, ``Mist``...) come back lower-cased and
    match no rule.
    """
    key = condition.strip().lower()
    return _CONDITION_GROUPS.get(key, key)


def matching_rules(weather: WeatherCondition) -> list[Rule]:
    """Return the rules that fire for ``weather``, in priority order."""
    rules: list[Rule] = []
    for upper, rule in TEMPERATURE_BANDS:
        if weather.temperature <= upper:
            rules.append(rule)
            break

    condition_rule = CONDITION_RULES.get(normalize_condition(weather.condition))
    if condition_rule is not None:
        rules.append(condition_rule)

    if weather.wind_speed > WIND_THRESHOLD:
        rules.append(WIND_RULE)
    if weather.humidity > HUMIDITY_THRESHOLD:
        rules.append(HUMIDITY_RULE)
    return rules


def recommend_clothing(
    weather: WeatherCondition, wardrobe: list[ClothingItem]
) -> list[tuple[ClothingItem, Rule]]:
    """Pick wardrobe items for ``weather``.

    Items are gathered rule by rule, category by category, in wardrobe
    order, and each item id appears once, paired with the first rule that
    selected it.
    """
    picked: list[tuple[ClothingItem, Rule]] = []
    seen: set[str] = set()
    for rule in matching_rules(weather):
        for category in rule.categories:
            for item in wardrobe:
                if item.id in seen or normalize_category(item.category) != category:
                    continue
                seen.add(item.id)
                picked.append((item, rule))
    return picked


def determine_style(weather: WeatherCondition) -> str:
    if weather.temperature <= COLD_MAX:
        return "warm"
    if weather.temperature >= HOT_MIN:
        return "cool"
    return "casual"


def describe(weather: WeatherCondition) -> str:
    description = "An outfit suited to today's weather."
    if weather.temperature <= COLD_MAX:
        description += " It's cold, so dress warmly."
    elif weather.temperature >= HOT_MIN:
        description += " It's hot, so dress lightly."
    if normalize_condition(weather.condition) == "rain":
        description += " Don't forget rain protection."
    return description


def generate_recommendation(
    weather: WeatherCondition, wardrobe: list[ClothingItem]
) -> FashionRecommendation:
    """Run the rules and package the outcome; id, owner and time are left unset."""
    items = [
        RecommendedItem(
            item_id=item.id,
            category=item.category,
            name=item.name,
            color=item.color,
            reason=rule.reason,
        )
        for item, rule in recommend_clothing(weather, wardrobe)
    ]
    return FashionRecommendation(
        style=determine_style(weather),
        items=items,
        weather=weather,
        reason=describe(weather),
    )
