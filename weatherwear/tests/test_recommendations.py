from __future__ import annotations

import uuid
from unittest.mock import patch

from fastapi.testclient import TestClient

from weatherwear.app import app
from weatherwear.recommendations.service import ANONYMOUS_USER_ID
from weatherwear.weather.models import WeatherCondition

client = TestClient(app)

RAINY_COLD = WeatherCondition(
    temperature=6.0,
    condition="Rain",
    description="moderate rain",
    humidity=88,
    wind_speed=4.0,
    location="Sapporo",
)
HOT_CLEAR = WeatherCondition(
    temperature=31.0,
    condition="Clear",
    humidity=30,
    wind_speed=1.0,
    location="Naha",
)


def _login(c) -> dict[str, str]:
    resp = c.post("/api/register", json={
        "name": "Stylist",
        "email": f"{uuid.uuid4().hex[:10]}@example.com",
        "password": "secret123",
    })
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def _add(c, headers, name, category):
    return c.post("/api/clothing", headers=headers, json={
        "name": name, "category": category, "color": "navy",
    }).json()


def _weather(reading: WeatherCondition):
    return patch("weatherwear.recommendations.service.get_current_weather", return_value=reading)


def test_recommendations_require_login():
    resp = client.post("/api/recommendations", json={"latitude": 43.06, "longitude": 141.35})
    assert resp.status_code == 401


def test_recommendation_for_rainy_cold_day():
    headers = _login(client)
    jacket = _add(client, headers, "Down jacket", "jacket")
    _add(client, headers, "Linen shirt", "summer_wear")
    boots = _add(client, headers, "Wellies", "rain_boots")
    airy = _add(client, headers, "Mesh top", "breathable")

    with _weather(RAINY_COLD) as mock_weather:
        resp = client.post("/api/recommendations", headers=headers, json={
            "latitude": 43.06, "longitude": 141.35, "location": "Sapporo Station",
        })
    mock_weather.assert_called_once_with(43.06, 141.35)

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"].startswith("recommendation_")
    assert body["style"] == "warm"
    assert body["location"] == "Sapporo Station"
    assert body["weather"]["condition"] == "Rain"
    assert body["reason"] == (
        "An outfit suited to today's weather. It's cold, so dress warmly. "
        "Don't forget rain protection."
    )
    assert [i["item_id"] for i in body["items"]] == [jacket["id"], boots["id"], airy["id"]]
    assert body["items"][1]["reason"] == "Keeps you dry in the rain"
    assert body["created_at"] is not None


def test_location_falls_back_to_weather_location():
    headers = _login(client)
    with _weather(HOT_CLEAR):
        body = client.post("/api/recommendations", headers=headers, json={
            "latitude": 26.2, "longitude": 127.68,
        }).json()
    assert body["location"] == "Naha"
    assert body["style"] == "cool"
    assert body["items"] == []


def test_only_own_wardrobe_is_used():
    alice, bob = _login(client), _login(client)
    _add(client, alice, "Sunhat", "hat")
    with _weather(HOT_CLEAR):
        body = client.post("/api/recommendations", headers=bob, json={
            "latitude": 26.2, "longitude": 127.68,
        }).json()
    assert body["items"] == []


def test_coordinates_are_validated():
    headers = _login(client)
    resp = client.post("/api/recommendations", headers=headers, json={"latitude": 120, "longitude": 0})
    assert resp.status_code == 422


def test_history_newest_first_and_detail():
    headers = _login(client)
    with _weather(RAINY_COLD):
        first = client.post("/api/recommendations", headers=headers, json={
            "latitude": 1, "longitude": 1,
        }).json()
    with _weather(HOT_CLEAR):
        second = client.post("/api/recommendations", headers=headers, json={
            "latitude": 1, "longitude": 1,
        }).json()

    history = client.get("/api/recommendations", headers=headers).json()
    assert [r["id"] for r in history] == [second["id"], first["id"]]

    detail = client.get(f"/api/recommendations/{first['id']}", headers=headers)
    assert detail.status_code == 200
    assert detail.json()["style"] == "warm"


def test_history_is_private():
    alice, bob = _login(client), _login(client)
    with _weather(HOT_CLEAR):
        rec = client.post("/api/recommendations", headers=alice, json={
            "latitude": 1, "longitude": 1,
        }).json()
    assert client.get("/api/recommendations", headers=bob).json() == []
    assert client.get(f"/api/recommendations/{rec['id']}", headers=bob).status_code == 403
    missing = client.get("/api/recommendations/recommendation_0", headers=bob)
    assert missing.status_code == 404


def test_legacy_endpoint_anonymous():
    with _weather(HOT_CLEAR):
        resp = client.get("/api/fashion-recommendations", params={
            "lat": 26.2, "lon": 127.68, "location": "Okinawa",
        })
    assert resp.status_code == 200
    body = resp.json()
    assert body["user_id"] == ANONYMOUS_USER_ID
    assert body["location"] == "Okinawa"
    assert body["items"] == []


def test_legacy_endpoint_uses_token_when_present():
    headers = _login(client)
    hat = _add(client, headers, "Bucket hat", "hat")
    with _weather(HOT_CLEAR):
        body = client.get("/api/fashion-recommendations", headers=headers, params={
            "lat": 26.2, "lon": 127.68,
        }).json()
    assert [i["item_id"] for i in body["items"]] == [hat["id"]]


def test_legacy_endpoint_ignores_bad_token():
    with _weather(HOT_CLEAR):
        resp = client.get(
            "/api/fashion-recommendations",
            headers={"Authorization": "Bearer garbage"},
            params={"lat": 0, "lon": 0},
        )
    assert resp.status_code == 200
    assert resp.json()["user_id"] == ANONYMOUS_USER_ID


def test_legacy_endpoint_requires_coordinates():
    assert client.get("/api/fashion-recommendations", params={"lat": 1}).status_code == 422
    assert client.get("/api/fashion-recommendations", params={"lat": "x", "lon": 1}).status_code == 422
