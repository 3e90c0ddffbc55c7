"""Integration tests for appointments."""

from datetime import date, timedelta

import pytest

pytestmark = pytest.mark.integration


def _future(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def test_add_and_list_soonest_first(api_client):
    api_client.post("/api/appointments", json={"date": _future(14), "time": "09:00", "location": "Clinic"})
    api_client.post("/api/appointments", json={"date": _future(7), "time": "15:30", "location": "Hospital"})
    api_client.post("/api/appointments", json={"date": _future(7), "time": "08:15", "location": "GP"})

    appointments = api_client.get("/api/appointments").json()

    assert [a["location"] for a in appointments] == ["GP", "Hospital", "Clinic"]
    assert appointments[0]["title"] == "Appointment"


def test_today_allowed(api_client):
    response = api_client.post(
        "/api/appointments",
        json={"date": date.today().isoformat(), "time": "23:59", "location": "Midwife", "title": "Check-up"},
    )

    assert response.status_code == 201
    assert response.json()["title"] == "Check-up"


def test_past_date_rejected(api_client):
    response = api_client.post("/api/appointments", json={"date": "2000-01-01", "time": "10:00", "location": "GP"})

    assert response.status_code == 400
    assert "past" in response.json()["detail"]


def test_location_required(api_client):
    response = api_client.post("/api/appointments", json={"date": _future(1), "time": "10:00", "location": "  "})
    assert response.status_code == 422


def test_delete(api_client):
    appointment = api_client.post(
        "/api/appointments", json={"date": _future(3), "time": "11:00", "location": "Clinic"}
    ).json()

    assert api_client.delete(f"/api/appointments/{appointment['id']}").status_code == 204
    assert api_client.get("/api/appointments").json() == []
