from __future__ import annotations

import itertools
import threading

from ..exceptions import NotFoundError, PermissionDeniedError
from .models import FashionRecommendation

_recommendations: dict[str, FashionRecommendation] = {}
_lock = threading.Lock()
_ids = itertools.count(1)


def save_recommendation(recommendation: FashionRecommendation) -> FashionRecommendation:
    with _lock:
        stored = recommendation.model_copy(
            update={"id": f"recommendation_{next(_ids)}"}, deep=True
        )
        _recommendations[stored.id] = stored
        return stored.model_copy(deep=True)


def get_recommendation(recommendation_id: str, user_id: str) -> FashionRecommendation:
    with _lock:
        rec = _recommendations.get(recommendation_id)
        if rec is None:
            raise NotFoundError(
                f"Recommendation not found: {recommendation_id}",
                code="RECOMMENDATION_NOT_FOUND",
            )
        if rec.user_id != user_id:
            raise PermissionDeniedError("This recommendation belongs to another user")
        return rec.model_copy(deep=True)


def list_recommendations(user_id: str) -> list[FashionRecommendation]:
    """The user's history, newest first."""
    with _lock:
        history = [r.model_copy(deep=True) for r in _recommendations.values() if r.user_id == user_id]
    history.reverse()
    return history
