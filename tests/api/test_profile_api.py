"""Integration tests for profile and display preferences."""

import pytest

pytestmark = pytest.mark.integration


class TestProfile:
    def test_defaults_for_new_user(self, api_client):
        data = api_client.get("/api/profile").json()

        assert data["height_cm"] == 165
        assert data["age_years"] == 28
        assert data["pre_pregnancy_weight_kg"] == 60
        assert data["pregnancy_week"] is None
        assert data["due_date"] is None

    def test_update_keeps_omitted_fields(self, api_client):
        api_client.put("/api/profile", json={"name": "Amira", "height_cm": 170})
        response = api_client.put("/api/profile", json={"baby_name": "Noor"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Amira"
        assert data["baby_name"] == "Noor"
        assert data["height_cm"] == 170

    def test_non_positive_height_rejected(self, api_client):
        assert api_client.put("/api/profile", json={"height_cm": 0}).status_code == 422


class TestPreferences:
    def test_defaults(self, api_client):
        data = api_client.get("/api/preferences").json()

        assert data["dark_mode"] is False
        assert data["sidebar_color"] == "purple"
        assert data["sidebar_gradient"] == "from-purple-600 to-pink-600"
        assert "teal" in data["available_colors"]

    def test_partial_update(self, api_client):
        api_client.put("/api/preferences", json={"dark_mode": True})
        data = api_client.put("/api/preferences", json={"sidebar_color": " Teal "}).json()

        assert data["dark_mode"] is True
        assert data["sidebar_color"] == "teal"
        assert data["sidebar_gradient"] == "from-teal-600 to-blue-600"

    def test_unknown_colour_rejected(self, api_client):
        assert api_client.put("/api/preferences", json={"sidebar_color": "mauve"}).status_code == 422
