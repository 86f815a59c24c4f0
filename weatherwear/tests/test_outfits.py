from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from weatherwear.app import app
from weatherwear.outfits.store import clear_posts

client = TestClient(app)


def _login(c, name="Mika") -> dict[str, str]:
    resp = c.post("/api/register", json={
        "name": name,
        "email": f"{uuid.uuid4().hex[:10]}@example.com",
        "password": "secret123",
    })
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def _post(c, headers, **overrides):
    body = {
        "title": "Rainy Monday",
        "items": ["Trench coat", "Rain boots"],
        "description": "Stayed dry all day",
        "tags": ["Rain", "#commute"],
        "location": "Osaka",
        "weather": {"temperature": 14.5, "condition": "Rain", "humidity": 90},
    }
    body.update(overrides)
    return c.post("/api/outfit-posts", headers=headers, json=body)


def test_create_requires_login():
    assert _post(client, {}).status_code == 401


def test_create_post():
    headers = _login(client, name="Mika")
    resp = _post(client, headers)
    assert resp.status_code == 201
    post = resp.json()
    assert post["id"].startswith("outfit_")
    assert post["user_name"] == "Mika"
    assert post["likes"] == 0
    assert post["tags"] == ["rain", "commute"]
    assert post["temperature"] == 14.5
    assert "liked_by" not in post


def test_explicit_temperature_wins():
    headers = _login(client)
    post = _post(client, headers, temperature=12.0).json()
    assert post["temperature"] == 12.0


def test_items_are_required():
    headers = _login(client)
    assert _post(client, headers, items=[]).status_code == 422
    assert _post(client, headers, items=["   "]).status_code == 422


def test_feed_is_public_and_newest_first():
    clear_posts()
    headers = _login(client)
    first = _post(client, headers, title="first").json()
    second = _post(client, headers, title="second", tags=["sunny"]).json()

    feed = client.get("/api/outfit-posts")
    assert feed.status_code == 200
    assert [p["id"] for p in feed.json()] == [second["id"], first["id"]]

    assert client.get(f"/api/outfit-posts/{first['id']}").json()["title"] == "first"


def test_feed_filters_and_pages():
    clear_posts()
    headers = _login(client)
    for i in range(5):
        _post(client, headers, title=f"p{i}", tags=["even"] if i % 2 == 0 else ["odd"])

    even = client.get("/api/outfit-posts", params={"tag": "#Even"}).json()
    assert [p["title"] for p in even] == ["p4", "p2", "p0"]

    page = client.get("/api/outfit-posts", params={"limit": 2, "offset": 1}).json()
    assert [p["title"] for p in page] == ["p3", "p2"]

    assert client.get("/api/outfit-posts", params={"limit": 0}).status_code == 422


def test_ids_are_not_reused_after_clearing():
    headers = _login(client)
    before = _post(client, headers).json()["id"]
    clear_posts()
    after = _post(client, headers).json()["id"]
    assert after != before
    assert int(after.split("_")[1]) > int(before.split("_")[1])


def test_my_posts():
    alice, bob = _login(client), _login(client)
    mine = _post(client, alice).json()
    _post(client, bob)
    listed = client.get("/api/outfit-posts/mine", headers=alice).json()
    assert [p["id"] for p in listed] == [mine["id"]]


def test_missing_post():
    resp = client.get("/api/outfit-posts/outfit_0")
    assert resp.status_code == 404
    assert resp.json()["code"] == "OUTFIT_POST_NOT_FOUND"


def test_like_is_once_per_user():
    author, fan, other = _login(client), _login(client), _login(client)
    post = _post(client, author).json()
    url = f"/api/outfit-posts/{post['id']}/like"

    assert client.post(url).status_code == 401
    assert client.post(url, headers=fan).json() == {"id": post["id"], "likes": 1, "liked": True}
    assert client.post(url, headers=fan).json()["likes"] == 1
    assert client.post(url, headers=other).json()["likes"] == 2

    assert client.delete(url, headers=fan).json() == {"id": post["id"], "likes": 1, "liked": False}
    assert client.delete(url, headers=fan).json()["likes"] == 1
    assert client.get(f"/api/outfit-posts/{post['id']}").json()["likes"] == 1


def test_like_missing_post():
    headers = _login(client)
    assert client.post("/api/outfit-posts/outfit_0/like", headers=headers).status_code == 404


def test_delete_owner_only():
    author, stranger = _login(client), _login(client)
    post = _post(client, author).json()
    assert client.delete(f"/api/outfit-posts/{post['id']}", headers=stranger).status_code == 403
    assert client.delete(f"/api/outfit-posts/{post['id']}", headers=author).status_code == 204
    assert client.get(f"/api/outfit-posts/{post['id']}").status_code == 404
