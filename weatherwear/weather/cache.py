from __future__ import annotations

import threading
import time
from typing import Any

from .models import WeatherCondition

_cache: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()
_hits: int = 0
_misses: int = 0
_DEFAULT_TTL = 600  # 10 minutes


def _make_key(latitude: float, longitude: float) -> str:
    # ~1 km grid; nearby requests share one upstream call
    return f"{round(latitude, 2):.2f},{round(longitude, 2):.2f}"


def cache_get(
    latitude: float, longitude: float, ttl: float = _DEFAULT_TTL
) -> WeatherCondition | None:
    global _hits, _misses
    key = _make_key(latitude, longitude)
    with _lock:
        entry = _cache.get(key)
        if entry and time.time() - entry["created_at"] < ttl:
            _hits += 1
            return entry["value"].model_copy()
        if entry:
            del _cache[key]
        _misses += 1
        return None


def cache_set(
    latitude: float, longitude: float, value: WeatherCondition, ttl: float = _DEFAULT_TTL
) -> None:
    key = _make_key(latitude, longitude)
    now = time.time()
    with _lock:
        # Expired cells are dropped on every write.
        for stale in [k for k, e in _cache.items() if now - e["created_at"] >= ttl]:
            del _cache[stale]
        _cache[key] = {"value": value.model_copy(), "created_at": now}


def get_cache_stats() -> dict:
    with _lock:
        total = _hits + _misses
        return {
            "size": len(_cache),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
