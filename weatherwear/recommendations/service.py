from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..wardrobe.store import list_items
from ..weather.client import get_current_weather
from .engine import generate_recommendation
from .models import FashionRecommendation, RecommendationRequest
from .store import save_recommendation

logger = logging.getLogger(__name__)

ANONYMOUS_USER_ID = "anonymous"


def get_recommendations(user_id: str, request: RecommendationRequest) -> FashionRecommendation:
    """Fetch weather, match it against the user's wardrobe and record the result."""
    weather = get_current_weather(request.latitude, request.longitude)
    wardrobe = list_items(user_id)

    recommendation = generate_recommendation(weather, wardrobe)
    recommendation = recommendation.model_copy(
        update={
            "user_id": user_id,
            "location": request.location or weather.location,
            "created_at": datetime.now(timezone.utc),
        }
    )
    saved = save_recommendation(recommendation)
    logger.info(
        "Recommendation %s for %s: %d of %d items, style=%s",
        saved.id,
        user_id,
        len(saved.items),
        len(wardrobe),
        saved.style,
    )
    return saved
