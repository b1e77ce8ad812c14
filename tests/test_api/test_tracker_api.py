"""
Tests for categories, tracks and logs API endpoints
"""


class TestCategoriesApi:
    def test_create_and_list(self, client, category):
        client.post("/api/v1/categories/", json={"name": "Self", "weight": 6})

        response = client.get("/api/v1/categories/")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Career", "Self"]

    def test_invalid_color_rejected(self, client):
        response = client.post("/api/v1/categories/", json={"name": "X", "color": "blue"})
        assert response.status_code == 422

    def test_blank_name_is_400(self, client):
        response = client.post("/api/v1/categories/", json={"name": "  "})
        assert response.status_code == 400

    def test_update(self, client, category):
        response = client.patch(f"/api/v1/categories/{category['id']}", json={"weight": 3})
        assert response.status_code == 200
        assert response.json()["weight"] == 3

    def test_update_missing_is_404(self, client):
        response = client.patch("/api/v1/categories/cat_nope", json={"weight": 3})
        assert response.status_code == 404

    def test_delete_soft_deletes_tracks(self, client, category, track):
        response = client.delete(f"/api/v1/categories/{category['id']}")
        assert response.status_code == 200
        assert response.json()["tracks_deleted"] == 1

        tracks = client.get("/api/v1/tracks/", params={"include_deleted": True}).json()
        assert tracks[0]["is_deleted"] is True

    def test_seed(self, client):
        assert client.post("/api/v1/categories/seed").json() == {"created": 7}
        assert client.post("/api/v1/categories/seed").json() == {"created": 0}


class TestTracksApi:
    def test_create_defaults(self, client, track):
        assert track["type"] == "checkbox"
        assert track["frequency"] == "daily"
        assert track["is_deleted"] is False
        assert track["id"].startswith("track_")

    def test_weekly_default_day(self, client, category):
        response = client.post("/api/v1/tracks/", json={
            "category_id": category["id"], "name": "Review", "frequency": "weekly",
        })
        assert response.json()["day_of_week"] == 0

    def test_invalid_type_rejected(self, client, category):
        response = client.post("/api/v1/tracks/", json={
            "category_id": category["id"], "name": "X", "type": "slider",
        })
        assert response.status_code == 422

    def test_day_out_of_range_is_400(self, client, category):
        response = client.post("/api/v1/tracks/", json={
            "category_id": category["id"], "name": "X", "frequency": "monthly", "day_of_month": 40,
        })
        assert response.status_code == 400

    def test_unknown_category_is_404(self, client):
        response = client.post("/api/v1/tracks/", json={"category_id": "cat_nope", "name": "X"})
        assert response.status_code == 404

    def test_delete(self, client, track):
        response = client.delete(f"/api/v1/tracks/{track['id']}")
        assert response.status_code == 200
        assert response.json()["is_deleted"] is True
        assert client.get("/api/v1/tracks/").json() == []

        again = client.delete(f"/api/v1/tracks/{track['id']}")
        assert again.status_code == 400

    def test_delete_missing_is_404(self, client):
        assert client.delete("/api/v1/tracks/track_nope").status_code == 404


class TestLogsApi:
    def test_save_is_upsert(self, client, track):
        first = client.post("/api/v1/logs/", json={"track_id": track["id"], "date": "2024-01-05", "value": 1})
        second = client.post("/api/v1/logs/", json={"track_id": track["id"], "date": "2024-01-05", "value": 0})

        assert first.status_code == 200
        assert second.json()["id"] == first.json()["id"]

        logs = client.get("/api/v1/logs/", params={"start": "2024-01-01", "end": "2024-01-31"}).json()
        assert [(log["date"], log["value"]) for log in logs] == [("2024-01-05", 0)]

    def test_negative_value_rejected(self, client, track):
        response = client.post("/api/v1/logs/", json={"track_id": track["id"], "date": "2024-01-05", "value": -3})
        assert response.status_code == 422

    def test_trailing_text_in_date_rejected(self, client, track):
        response = client.post("/api/v1/logs/", json={"track_id": track["id"], "date": "2024-01-05xyz", "value": 1})
        assert response.status_code == 422

    def test_unknown_track_is_404(self, client):
        response = client.post("/api/v1/logs/", json={"track_id": "track_nope", "date": "2024-01-05", "value": 1})
        assert response.status_code == 404

    def test_list_requires_valid_dates(self, client):
        response = client.get("/api/v1/logs/", params={"start": "yesterday", "end": "2024-01-31"})
        assert response.status_code == 400

    def test_update_and_delete(self, client, track):
        log = client.post("/api/v1/logs/", json={"track_id": track["id"], "date": "2024-01-05", "value": 1}).json()

        updated = client.patch(f"/api/v1/logs/{log['id']}", json={"note": "done early"})
        assert updated.json()["note"] == "done early"

        assert client.delete(f"/api/v1/logs/{log['id']}").status_code == 200
        assert client.delete(f"/api/v1/logs/{log['id']}").status_code == 404
