from fastapi.testclient import TestClient

import config
from catalog import suggested_file_name
from main import app
from schemas import ContentItemRecord


def create(client, headers, payload):
    response = client.post("/api/content", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_get_delete_scenario(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)
    assert created["id"] == 1
    assert created["downloadCount"] == 0
    assert created["featured"] is False
    assert created["description"] is None
    assert created["createdAt"]

    fetched = client.get(f"/api/content/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    deleted = client.delete(f"/api/content/{created['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Content item deleted successfully"}

    missing = client.get(f"/api/content/{created['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Content item not found"}


def test_server_assigned_fields_are_ignored(client, admin_headers, flyer):
    created = create(client, admin_headers, {**flyer, "id": 42, "downloadCount": 99, "createdAt": "2000-01-01"})
    assert created["id"] == 1
    assert created["downloadCount"] == 0
    assert not created["createdAt"].startswith("2000")


def test_create_requires_admin(client, flyer):
    response = client.post("/api/content", json=flyer)
    assert response.status_code == 401
    assert response.json() == {"message": "No session token provided"}

    response = client.post("/api/content", json=flyer, headers={"Authorization": "Bearer bogus"})
    assert response.status_code == 401


def test_create_reports_every_invalid_field(client, admin_headers):
    response = client.post(
        "/api/content",
        json={"title": "", "category": "posters", "type": "video"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid content data"
    fields = {error["field"] for error in body["errors"]}
    assert {"title", "category", "fileUrl", "thumbnailUrl"} <= fields
    assert "type" not in fields


def test_ids_keep_increasing_after_delete(client, admin_headers, flyer):
    first = create(client, admin_headers, flyer)
    client.delete(f"/api/content/{first['id']}", headers=admin_headers)
    second = create(client, admin_headers, flyer)
    assert second["id"] > first["id"]


def test_list_precedence_and_category_filter(client, admin_headers, flyer):
    events = create(client, admin_headers, flyer)
    store = create(client, admin_headers, {**flyer, "title": "Mug", "category": "store", "type": "mockup"})
    featured = create(client, admin_headers, {**flyer, "title": "Reel", "category": "store", "type": "video", "featured": True})

    def ids(response):
        return [item["id"] for item in response.json()]

    assert ids(client.get("/api/content")) == [events["id"], store["id"], featured["id"]]
    assert ids(client.get("/api/content", params={"category": "store"})) == [store["id"], featured["id"]]
    assert ids(client.get("/api/content", params={"category": "general"})) == []
    # featured ignores category
    assert ids(client.get("/api/content", params={"featured": "true", "category": "events"})) == [featured["id"]]
    # search ignores featured and category
    assert ids(client.get("/api/content", params={"search": "MUG", "featured": "true", "category": "events"})) == [store["id"]]
    # an empty search falls through to the category filter
    assert ids(client.get("/api/content", params={"search": "", "category": "events"})) == [events["id"]]
    assert ids(client.get("/api/content", params={"featured": "yes"})) == ids(client.get("/api/content"))


def test_partial_update_with_put_and_patch(client, admin_headers, flyer):
    created = create(client, admin_headers, {**flyer, "description": "Old"})

    patched = client.patch(f"/api/content/{created['id']}", json={"featured": True}, headers=admin_headers)
    assert patched.status_code == 200
    assert patched.json()["featured"] is True
    assert patched.json()["title"] == "Flyer"

    put = client.put(f"/api/content/{created['id']}", json={"title": "Poster", "description": None}, headers=admin_headers)
    assert put.status_code == 200
    assert put.json()["title"] == "Poster"
    assert put.json()["description"] is None
    assert put.json()["featured"] is True


def test_update_rejects_bad_values_and_unknown_ids(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)

    bad = client.patch(f"/api/content/{created['id']}", json={"type": "podcast", "title": None}, headers=admin_headers)
    assert bad.status_code == 400
    assert {e["field"] for e in bad.json()["errors"]} == {"type", "title"}

    missing = client.patch("/api/content/999", json={"title": "x"}, headers=admin_headers)
    assert missing.status_code == 404
    assert client.delete("/api/content/999", headers=admin_headers).status_code == 404


def test_update_cannot_touch_download_count(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)
    client.post(f"/api/content/{created['id']}/download")
    patched = client.patch(f"/api/content/{created['id']}", json={"downloadCount": 0}, headers=admin_headers)
    assert patched.json()["downloadCount"] == 1


def test_download_records_event_and_increments(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)

    for _ in range(3):
        response = client.post(f"/api/content/{created['id']}/download", headers={"User-Agent": "pytest"})
        assert response.status_code == 200
        assert response.json() == {
            "message": "Download recorded successfully",
            "fileUrl": "http://x/a.jpg",
            "fileName": "Flyer.jpg",
        }

    assert client.get(f"/api/content/{created['id']}").json()["downloadCount"] == 3
    storage = client.app.state.storage
    assert storage.get_download_stats(created["id"]) == 3


def test_download_unknown_item_has_no_side_effects(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)
    response = client.post("/api/content/999/download")
    assert response.status_code == 404

    storage = client.app.state.storage
    assert storage.get_download_stats(999) == 0
    assert storage.get_content_item(created["id"]).download_count == 0


def test_download_stats_endpoint(client, admin_headers, flyer):
    created = create(client, admin_headers, flyer)
    client.post(f"/api/content/{created['id']}/download")

    assert client.get("/api/stats/downloads").status_code == 401
    stats = client.get("/api/stats/downloads", headers=admin_headers).json()
    assert stats == [{
        "id": created["id"],
        "title": "Flyer",
        "category": "events",
        "downloadCount": 1,
        "recordedDownloads": 1,
    }]


def test_suggested_file_names():
    def item(content_type, title="Kit"):
        return ContentItemRecord(
            id=1, title=title, category="store", type=content_type,
            file_url="/f", thumbnail_url="/t", created_at="2024-01-01T00:00:00Z",
        )

    assert suggested_file_name(item("video", "Promo")) == "Promo.mp4"
    assert suggested_file_name(item("graphic")) == "Kit.jpg"
    assert suggested_file_name(item("template")) == "Kit.zip"
    assert suggested_file_name(item("bundle")) == "Kit.zip"
    assert suggested_file_name(item("mockup")) == "Kit.zip"


def test_categories_endpoint(client):
    categories = client.get("/api/categories").json()
    assert [c["id"] for c in categories] == ["social-media", "field-tools", "events", "store", "general"]
    assert all(c["label"] for c in categories)


def test_content_types_endpoint(client):
    types = {t["id"]: t for t in client.get("/api/content-types").json()}
    assert set(types) == {"video", "graphic", "template", "bundle", "mockup"}
    assert types["video"]["extension"] == "mp4"
    assert types["bundle"]["icon"] == "package"


def test_unexpected_errors_return_generic_500(monkeypatch):
    monkeypatch.setattr(config, "STORAGE_BACKEND", "memory")
    monkeypatch.setattr(config, "SEED_SAMPLE_CONTENT", False)

    def broken(*args, **kwargs):
        raise RuntimeError("secret internals")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        monkeypatch.setattr(test_client.app.state.storage, "get_content_items", broken)
        response = test_client.get("/api/content")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "secret internals" not in response.text
