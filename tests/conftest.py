from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

import config
from main import app
from storage import build_storage


@pytest.fixture
def client(monkeypatch):
    # Fresh in-memory store and session registry per test (built on startup)
    monkeypatch.setattr(config, "STORAGE_BACKEND", "memory")
    monkeypatch.setattr(config, "SEED_SAMPLE_CONTENT", False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/admin/login",
        json={"username": config.ADMIN_USERNAME, "password": config.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture(params=["memory", "database"])
def storage(request):
    if request.param == "memory":
        return build_storage("memory")
    return build_storage("database", "sqlite://")


@pytest.fixture
def flyer():
    return {
        "title": "Flyer",
        "category": "events",
        "type": "graphic",
        "fileUrl": "http://x/a.jpg",
        "thumbnailUrl": "http://x/a-thumb.jpg",
    }


@pytest.fixture
def project_payload():
    return {
        "fullName": "Jordan Lee",
        "email": "jordan@example.com",
        "projectType": "video-production",
        "timeline": "standard",
        "dueDate": (date.today() + timedelta(days=30)).isoformat(),
        "description": "Promo video for the spring leadership event.",
        "contactMethod": "email",
    }
