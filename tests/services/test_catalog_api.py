# tests/services/test_catalog_api.py
from __future__ import annotations

import uuid
from decimal import Decimal


def _post(api_client, path, payload, expected=201):
    r = api_client.post(path, json=payload)
    assert r.status_code == expected, r.text
    return r.json()


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_flower_lifecycle(api_client):
    f = _post(api_client, "/api/flowers", {"name": "Rose", "price": "2.50", "scientific_name": "Rosa"})
    assert Decimal(f["price"]) == Decimal("2.50")
    assert f["image_url"] == "/placeholder-image.jpg"

    r = api_client.get(f"/api/flowers/{f['id'].upper()}")
    assert r.status_code == 200 and r.json()["id"] == f["id"]

    r = api_client.patch(f"/api/flowers/{f['id']}", json={"in_stock": 40})
    assert r.status_code == 200
    assert r.json()["in_stock"] == 40 and r.json()["scientific_name"] == "Rosa"

    r = api_client.get("/api/flowers", params={"q": "rosa"})
    assert [x["id"] for x in r.json()] == [f["id"]]

    assert api_client.delete(f"/api/flowers/{f['id']}").status_code == 204
    assert api_client.get(f"/api/flowers/{f['id']}").status_code == 404
    assert api_client.delete(f"/api/flowers/{f['id']}").status_code == 404


def test_malformed_id_is_a_400(api_client):
    r = api_client.get("/api/flowers/not-a-uuid")
    assert r.status_code == 400
    assert r.json()["field"] == "flower_id"


def test_unknown_category_is_a_400(api_client):
    r = api_client.post("/api/flowers", json={"name": "Rose", "price": "1", "category_id": str(uuid.uuid4())})
    assert r.status_code == 400
    assert r.json()["field"] == "category_id"


def test_schema_validation_is_a_422(api_client):
    r = api_client.post("/api/flowers", json={"name": "Rose", "price": "-1"})
    assert r.status_code == 422


def test_categories_and_members(api_client):
    c = _post(api_client, "/api/categories", {"name": "Spring"})
    f = _post(api_client, "/api/flowers", {"name": "Tulip", "price": "1.20", "category_id": c["id"]})
    b = _post(api_client, "/api/bouquets", {"name": "Spring Mix", "price": "25", "category_id": c["id"]})

    assert [x["name"] for x in api_client.get("/api/categories").json()] == ["Spring"]
    assert [x["id"] for x in api_client.get(f"/api/categories/{c['id']}/flowers").json()] == [f["id"]]
    assert [x["id"] for x in api_client.get(f"/api/categories/{c['id']}/bouquets").json()] == [b["id"]]

    r = api_client.post("/api/categories", json={"name": "spring"})
    assert r.status_code == 400

    assert api_client.delete(f"/api/categories/{c['id']}").status_code == 204
    assert api_client.get(f"/api/flowers/{f['id']}").json()["category_id"] is None


def test_tags_and_assignment(api_client):
    t1 = _post(api_client, "/api/tags", {"name": "romantic"})
    t2 = _post(api_client, "/api/tags", {"name": "classic"})
    assert api_client.post("/api/tags", json={"name": "Romantic"}).status_code == 400

    f = _post(api_client, "/api/flowers", {"name": "Rose", "price": "2"})
    r = api_client.put(f"/api/flowers/{f['id']}/tags", json={"tag_ids": [t1["id"], t2["id"]]})
    assert r.status_code == 200
    assert [t["name"] for t in r.json()] == ["classic", "romantic"]
    assert [t["name"] for t in api_client.get(f"/api/flowers/{f['id']}").json()["tags"]] == ["classic", "romantic"]

    r = api_client.put(f"/api/flowers/{uuid.uuid4()}/tags", json={"tag_ids": []})
    assert r.status_code == 404

    r = api_client.patch(f"/api/tags/{t2['id']}", json={"name": "timeless"})
    assert r.json()["name"] == "timeless"
    assert api_client.delete(f"/api/tags/{t2['id']}").status_code == 204
    assert api_client.get(f"/api/tags/{t2['id']}").status_code == 404


def test_media_listing_uses_browser_urls(api_client):
    f = _post(api_client, "/api/flowers", {"name": "Rose", "price": "2"})
    m1 = _post(api_client, f"/api/media/flower/{f['id']}", {"file_path": "roses/red.jpg", "display_order": 1})
    m2 = _post(api_client, f"/api/media/flower/{f['id']}", {"file_url": "https://cdn.example.com/r.jpg"})

    items = api_client.get(f"/api/media/flower/{f['id']}").json()
    assert [m["id"] for m in items] == [m2["id"], m1["id"]]
    assert items[1]["url"] == "/api/r2-upload/roses/red.jpg"
    assert items[0]["url"] == "https://cdn.example.com/r.jpg"

    # the storefront payload resolves against the app's own storage
    r = api_client.put(f"/api/media/flower/{f['id']}/thumbnail/{m1['id']}")
    assert r.status_code == 204
    assert api_client.get(f"/api/flowers/{f['id']}").json()["image_url"] == "/storage/roses/red.jpg"

    assert api_client.delete(f"/api/media/flower/items/{m1['id']}").status_code == 204
    assert [m["id"] for m in api_client.get(f"/api/media/flower/{f['id']}").json()] == [m2["id"]]


def test_media_needs_a_reference(api_client):
    f = _post(api_client, "/api/flowers", {"name": "Rose", "price": "2"})
    assert api_client.post(f"/api/media/flower/{f['id']}", json={"file_name": "x.jpg"}).status_code == 422
    assert api_client.post(f"/api/media/flower/{uuid.uuid4()}", json={"file_path": "x.jpg"}).status_code == 404
    assert api_client.get(f"/api/media/vase/{f['id']}").status_code == 422


def test_colors_and_flowers_by_color(api_client):
    red = _post(api_client, "/api/colors", {"name": "Red", "hex": "#FF0000"})
    assert red["hex_code"] == "#ff0000"
    white = _post(api_client, "/api/colors", {"name": "White", "hex_code": "fff"})
    assert white["hex_code"] == "#ffffff"
    _post(api_client, "/api/colors", {"name": "red", "hex_code": "#ee0000"}, expected=400)
    _post(api_client, "/api/colors", {"name": "Teal", "hex_code": "teal"}, expected=422)

    rose = _post(api_client, "/api/flowers", {"name": "Rose", "price": "2.50"})
    r = api_client.put(f"/api/flowers/{rose['id']}/colors", json={"color_ids": [white["id"], red["id"]]})
    assert r.status_code == 200
    assert [c["name"] for c in r.json()] == ["Red", "White"]
    assert [c["name"] for c in api_client.get(f"/api/flowers/{rose['id']}").json()["colors"]] == ["Red", "White"]

    r = api_client.get(f"/api/colors/{red['id']}/flowers")
    assert [f["id"] for f in r.json()] == [rose["id"]]
    assert api_client.get(f"/api/colors/{uuid.uuid4()}/flowers").status_code == 404

    r = api_client.patch(f"/api/colors/{red['id']}", json={"name": "Crimson"})
    assert r.status_code == 200 and r.json()["hex_code"] == "#ff0000"
    assert [c["name"] for c in api_client.get("/api/colors").json()] == ["Crimson", "White"]

    assert api_client.delete(f"/api/colors/{red['id']}").status_code == 204
    assert api_client.get(f"/api/colors/{red['id']}").status_code == 404
    assert [c["name"] for c in api_client.get(f"/api/flowers/{rose['id']}/colors").json()] == ["White"]
