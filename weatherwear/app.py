from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, Query, Response
from fastapi.middleware.cors import CORSMiddleware

from .auth.dependencies import optional_user, require_user
from .auth.models import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    User,
)
from .auth.tokens import create_token
from .auth.users import authenticate, create_user, get_user, update_profile
from .config import DEFAULT_APP_CONFIG
from .exceptions import WeatherwearError, weatherwear_exception_handler
from .outfits.models import LikeResponse, OutfitPost, OutfitPostRequest
from .outfits.store import (
    create_post,
    delete_post,
    get_post,
    like_post,
    list_posts,
    list_user_posts,
    unlike_post,
)
from .recommendations.models import FashionRecommendation, RecommendationRequest
from .recommendations.service import ANONYMOUS_USER_ID, get_recommendations
from .recommendations.store import get_recommendation, list_recommendations
from .wardrobe.categories import list_categories
from .wardrobe.models import ClothingCategoryOut, ClothingItem, ClothingItemRequest
from .wardrobe.store import create_item, delete_item, get_item, list_items, update_item
from .weather.client import get_current_weather
from .weather.models import WeatherCondition

logging.basicConfig(
    level=DEFAULT_APP_CONFIG.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

if DEFAULT_APP_CONFIG.using_dev_secret:
    logger.warning("Using the development JWT secret; set JWT_SECRET in production")

app = FastAPI(title="Weatherwear API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(DEFAULT_APP_CONFIG.cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_exception_handler(WeatherwearError, weatherwear_exception_handler)

Latitude = Annotated[float, Query(ge=-90.0, le=90.0)]
Longitude = Annotated[float, Query(ge=-180.0, le=180.0)]


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/weather", response_model=WeatherCondition)
def weather(lat: Latitude, lon: Longitude) -> WeatherCondition:
    return get_current_weather(lat, lon)


@app.get("/api/clothing/categories", response_model=list[ClothingCategoryOut])
def clothing_categories() -> list[dict[str, str]]:
    return list_categories()


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/api/register", response_model=AuthResponse)
def register(body: RegisterRequest) -> AuthResponse:
    user = create_user(body)
    return AuthResponse(user=user, token=create_token(user))


@app.post("/api/login", response_model=AuthResponse)
def login(body: LoginRequest) -> AuthResponse:
    user = authenticate(body.email, body.password)
    return AuthResponse(user=user, token=create_token(user))


@app.get("/api/profile", response_model=User)
def profile(user: User = Depends(require_user)) -> User:
    return get_user(user.id)


@app.put("/api/profile", response_model=User)
def edit_profile(body: ProfileUpdateRequest, user: User = Depends(require_user)) -> User:
    return update_profile(user.id, body.name, body.preferences)


# ── Wardrobe endpoints ───────────────────────────────────────────────────


@app.post("/api/clothing", response_model=ClothingItem, status_code=201)
def add_clothing(body: ClothingItemRequest, user: User = Depends(require_user)) -> ClothingItem:
    return create_item(user.id, body)


@app.get("/api/clothing", response_model=list[ClothingItem])
def wardrobe(user: User = Depends(require_user)) -> list[ClothingItem]:
    return list_items(user.id)


@app.get("/api/clothing/{item_id}", response_model=ClothingItem)
def clothing_item(item_id: str, user: User = Depends(require_user)) -> ClothingItem:
    return get_item(item_id, user.id)


@app.put("/api/clothing/{item_id}", response_model=ClothingItem)
def edit_clothing(
    item_id: str,
    body: ClothingItemRequest,
    user: User = Depends(require_user),
) -> ClothingItem:
    return update_item(item_id, user.id, body)


@app.delete("/api/clothing/{item_id}", status_code=204)
def remove_clothing(item_id: str, user: User = Depends(require_user)) -> Response:
    delete_item(item_id, user.id)
    return Response(status_code=204)


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/api/recommendations", response_model=FashionRecommendation)
def recommend(
    body: RecommendationRequest,
    user: User = Depends(require_user),
) -> FashionRecommendation:
    return get_recommendations(user.id, body)


@app.get("/api/recommendations", response_model=list[FashionRecommendation])
def recommendation_history(user: User = Depends(require_user)) -> list[FashionRecommendation]:
    return list_recommendations(user.id)


@app.get("/api/recommendations/{recommendation_id}", response_model=FashionRecommendation)
def recommendation_detail(
    recommendation_id: str,
    user: User = Depends(require_user),
) -> FashionRecommendation:
    return get_recommendation(recommendation_id, user.id)


@app.get("/api/fashion-recommendations", response_model=FashionRecommendation)
def recommend_legacy(
    lat: Latitude,
    lon: Longitude,
    location: Annotated[str, Query(max_length=200)] = "",
    user: User | None = Depends(optional_user),
) -> FashionRecommendation:
    # Query-string variant kept for older clients; works without a token.
    user_id = user.id if user else ANONYMOUS_USER_ID
    request = RecommendationRequest(latitude=lat, longitude=lon, location=location)
    return get_recommendations(user_id, request)


# ── Outfit post endpoints ────────────────────────────────────────────────


@app.get("/api/outfit-posts", response_model=list[OutfitPost])
def outfit_feed(
    tag: str | None = None,
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> list[OutfitPost]:
    return list_posts(tag=tag, limit=limit, offset=offset)


@app.post("/api/outfit-posts", response_model=OutfitPost, status_code=201)
def share_outfit(body: OutfitPostRequest, user: User = Depends(require_user)) -> OutfitPost:
    return create_post(user.id, user.name, body)


@app.get("/api/outfit-posts/mine", response_model=list[OutfitPost])
def my_outfits(user: User = Depends(require_user)) -> list[OutfitPost]:
    return list_user_posts(user.id)


@app.get("/api/outfit-posts/{post_id}", response_model=OutfitPost)
def outfit_detail(post_id: str) -> OutfitPost:
    return get_post(post_id)


@app.post("/api/outfit-posts/{post_id}/like", response_model=LikeResponse)
def like_outfit(post_id: str, user: User = Depends(require_user)) -> LikeResponse:
    post = like_post(post_id, user.id)
    return LikeResponse(id=post.id, likes=post.likes, liked=True)


@app.delete("/api/outfit-posts/{post_id}/like", response_model=LikeResponse)
def unlike_outfit(post_id: str, user: User = Depends(require_user)) -> LikeResponse:
    post = unlike_post(post_id, user.id)
    return LikeResponse(id=post.id, likes=post.likes, liked=False)


@app.delete("/api/outfit-posts/{post_id}", status_code=204)
def remove_outfit(post_id: str, user: User = Depends(require_user)) -> Response:
    delete_post(post_id, user.id)
    return Response(status_code=204)
