from __future__ import annotations

import itertools
import threading
from datetime import datetime, timezone

from ..exceptions import NotFoundError, PermissionDeniedError
from .models import ClothingItem, ClothingItemRequest

_items: dict[str, ClothingItem] = {}
_lock = threading.Lock()
_ids = itertools.count(1)


def _owned(item_id: str, user_id: str) -> ClothingItem:
    item = _items.get(item_id)
    if item is None:
        raise NotFoundError(f"Clothing item not found: {item_id}", code="CLOTHING_NOT_FOUND")
    if item.user_id != user_id:
        raise PermissionDeniedError("You do not own this clothing item")
    return item


def create_item(user_id: str, body: ClothingItemRequest) -> ClothingItem:
    with _lock:
        item = ClothingItem(
            id=f"clothing_{next(_ids)}",
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            **body.model_dump(),
        )
        _items[item.id] = item
        return item.model_copy()


def list_items(user_id: str) -> list[ClothingItem]:
    """Return the user's wardrobe in the order items were added."""
    with _lock:
        return [i.model_copy() for i in _items.values() if i.user_id == user_id]


def get_item(item_id: str, user_id: str) -> ClothingItem:
    with _lock:
        return _owned(item_id, user_id).model_copy()


def update_item(item_id: str, user_id: str, body: ClothingItemRequest) -> ClothingItem:
    with _lock:
        item = _owned(item_id, user_id).model_copy(update=body.model_dump())
        _items[item_id] = item
        return item.model_copy()


def delete_item(item_id: str, user_id: str) -> None:
    with _lock:
        _owned(item_id, user_id)
        del _items[item_id]
