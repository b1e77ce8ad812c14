"""
API test fixtures: TestClient over the shared in-memory session
"""
import pytest
from fastapi.testclient import TestClient

from lifeos.api.deps import get_db, get_today
from lifeos.main import app


@pytest.fixture
def client(db_session, today):
    """TestClient with get_db bound to the test session and a fixed 'today'"""
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_today] = lambda: today
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def category(client):
    response = client.post("/api/v1/categories/", json={"name": "Career", "weight": 10, "color": "#3b82f6"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def track(client, category):
    response = client.post("/api/v1/tracks/", json={"category_id": category["id"], "name": "Read"})
    assert response.status_code == 201
    return response.json()
