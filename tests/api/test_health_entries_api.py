"""Integration tests for health tracking and the weight-gain summary."""

import uuid
from datetime import date, timedelta

import pytest

pytestmark = pytest.mark.integration


def test_entries_listed_oldest_first(api_client):
    api_client.post("/api/health-entries", json={"weight_kg": 63, "date": "2026-02-01"})
    api_client.post("/api/health-entries", json={"weight_kg": 61, "date": "2026-01-01"})

    entries = api_client.get("/api/health-entries").json()

    assert [e["date"] for e in entries] == ["2026-01-01", "2026-02-01"]


def test_date_defaults_to_today(api_client):
    response = api_client.post(
        "/api/health-entries",
        json={"weight_kg": 62.5, "systolic_bp": 118, "diastolic_bp": 76},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["date"] == date.today().isoformat()
    assert data["systolic_bp"] == 118


def test_weight_required_and_positive(api_client):
    assert api_client.post("/api/health-entries", json={"systolic_bp": 120}).status_code == 422
    assert api_client.post("/api/health-entries", json={"weight_kg": 0}).status_code == 422


def test_summary_without_entries_is_no_data(api_client):
    data = api_client.get("/api/health-entries/summary").json()

    assert data["status"]["band"] == "no_data"
    assert data["total_entries"] == 0
    assert data["current_weight_kg"] is None


def test_summary_uses_week_from_stored_due_date(api_client):
    due = date.today() + timedelta(weeks=30)
    api_client.put("/api/profile", json={"due_date": due.isoformat()})
    api_client.post("/api/health-entries", json={"weight_kg": 65, "date": "2026-01-01"})

    data = api_client.get("/api/health-entries/summary").json()
    status = data["status"]

    assert status["pregnancy_week"] == 10
    assert status["current_gain_kg"] == pytest.approx(5)
    assert status["expected_gain_kg"] == pytest.approx(4)
    assert status["band"] == "healthy"
    assert data["entries"][0]["bmi"] == 23.9
    assert data["entries"][0]["gain_kg"] == pytest.approx(5)


def test_summary_week_zero_without_due_date(api_client):
    api_client.post("/api/health-entries", json={"weight_kg": 55})

    status = api_client.get("/api/health-entries/summary").json()["status"]

    assert status["pregnancy_week"] == 0
    assert status["band"] == "underweight_gain"
    assert status["display_progress_percent"] == 0


def test_delete_entry(api_client):
    entry_id = api_client.post("/api/health-entries", json={"weight_kg": 60}).json()["id"]

    assert api_client.delete(f"/api/health-entries/{entry_id}").status_code == 204
    assert api_client.get("/api/health-entries").json() == []


def test_delete_missing_entry_404(api_client):
    response = api_client.delete(f"/api/health-entries/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Health entry not found"
    assert "debug_id" in response.json()
