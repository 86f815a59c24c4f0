from __future__ import annotations

import itertools
import threading
from datetime import datetime, timezone

from ..exceptions import NotFoundError, PermissionDeniedError
from .models import OutfitPost, OutfitPostRequest

_posts: dict[str, OutfitPost] = {}
_lock = threading.Lock()
_ids = itertools.count(1)


def _get(post_id: str) -> OutfitPost:
    post = _posts.get(post_id)
    if post is None:
        raise NotFoundError(f"Outfit post not found: {post_id}", code="OUTFIT_POST_NOT_FOUND")
    return post


def _clean_tags(tags: list[str]) -> list[str]:
    cleaned: list[str] = []
    for tag in tags:
        tag = tag.strip().lower().lstrip("#")
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def create_post(user_id: str, user_name: str, body: OutfitPostRequest) -> OutfitPost:
    data = body.model_dump()
    data["tags"] = _clean_tags(body.tags)
    if data["temperature"] is None and body.weather is not None:
        data["temperature"] = body.weather.temperature
    with _lock:
        post = OutfitPost(
            id=f"outfit_{next(_ids)}",
            user_id=user_id,
            user_name=user_name,
            created_at=datetime.now(timezone.utc),
            **data,
        )
        _posts[post.id] = post
        return post.model_copy(deep=True)


def list_posts(tag: str | None = None, limit: int = 50, offset: int = 0) -> list[OutfitPost]:
    """All posts, newest first, optionally only those carrying ``tag``."""
    wanted = tag.strip().lower().lstrip("#") if tag else None
    with _lock:
        posts = [p for p in reversed(_posts.values()) if wanted is None or wanted in p.tags]
        return [p.model_copy(deep=True) for p in posts[offset : offset + limit]]


def list_user_posts(user_id: str) -> list[OutfitPost]:
    with _lock:
        return [p.model_copy(deep=True) for p in reversed(_posts.values()) if p.user_id == user_id]


def get_post(post_id: str) -> OutfitPost:
    with _lock:
        return _get(post_id).model_copy(deep=True)


def like_post(post_id: str, user_id: str) -> OutfitPost:
    """Record a like; liking twice leaves the count unchanged."""
    with _lock:
        post = _get(post_id)
        if user_id not in post.liked_by:
            post.liked_by.append(user_id)
            post.likes = len(post.liked_by)
        return post.model_copy(deep=True)


def unlike_post(post_id: str, user_id: str) -> OutfitPost:
    with _lock:
        post = _get(post_id)
        if user_id in post.liked_by:
            post.liked_by.remove(user_id)
            post.likes = len(post.liked_by)
        return post.model_copy(deep=True)


def delete_post(post_id: str, user_id: str) -> None:
    with _lock:
        post = _get(post_id)
        if post.user_id != user_id:
            raise PermissionDeniedError("You do not own this outfit post")
        del _posts[post_id]


def clear_posts() -> None:
    with _lock:
        _posts.clear()
