"""Integration tests for the dashboard endpoint."""

from datetime import date, timedelta

import pytest

from app.domain.pregnancy import MILESTONES

pytestmark = pytest.mark.integration


def test_new_user_needs_week_selection(api_client):
    response = api_client.get("/api/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["needs_week_selection"] is True
    assert data["progress"] is None
    assert data["trimester"] is None


def test_progress_after_choosing_week(api_client):
    assert api_client.put("/api/profile/week", json={"week": 20}).status_code == 200

    data = api_client.get("/api/dashboard").json()

    assert data["needs_week_selection"] is False
    progress = data["progress"]
    assert progress["current_week"] == 20
    assert progress["weeks_remaining"] == 20
    assert progress["percent_complete"] == 50
    assert progress["milestone_week"] == 20
    assert progress["milestone_text"] == MILESTONES[20]
    assert progress["due_date"] == (date.today() + timedelta(weeks=20)).isoformat()
    assert data["trimester"]["trimester"] == 2


def test_stored_due_date_reported_separately(api_client):
    stored = (date.today() + timedelta(weeks=25)).isoformat()
    api_client.put("/api/profile", json={"due_date": stored, "name": "Amira"})
    api_client.put("/api/profile/week", json={"week": 12})

    data = api_client.get("/api/dashboard").json()

    assert data["stored_due_date"] == stored
    assert data["progress"]["due_date"] == (date.today() + timedelta(weeks=28)).isoformat()
    assert data["name"] == "Amira"


def test_week_out_of_range_rejected(api_client):
    assert api_client.put("/api/profile/week", json={"week": 0}).status_code == 422
    assert api_client.put("/api/profile/week", json={"week": 43}).status_code == 422
