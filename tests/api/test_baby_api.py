"""Integration tests for week-by-week baby content."""

import pytest

from app.db.content import load_content

pytestmark = pytest.mark.integration


@pytest.fixture
async def weeks(db_session):
    await load_content(
        db_session,
        {
            "pregnancy_weeks": [
                {
                    "week_number": 20,
                    "trimester": 2,
                    "baby_size_comparison": "a banana",
                    "baby_size_inches": 6.5,
                    "development_highlights": ["Hearing develops"],
                },
                {"week_number": 24, "trimester": 2, "baby_size_comparison": "an ear of corn"},
            ]
        },
    )


def test_default_week_when_none_chosen(weeks, api_client):
    data = api_client.get("/api/baby").json()

    assert data["week"] == 20
    assert data["weeks_to_go"] == 20
    assert data["trimester"]["trimester"] == 2
    assert data["content"]["baby_size_comparison"] == "a banana"
    assert data["content"]["development_highlights"] == ["Hearing develops"]


def test_profile_week_used(weeks, api_client):
    api_client.put("/api/profile/week", json={"week": 24})

    data = api_client.get("/api/baby").json()

    assert data["week"] == 24
    assert data["content"]["baby_size_comparison"] == "an ear of corn"


def test_week_without_content(weeks, api_client):
    data = api_client.get("/api/baby/weeks/30").json()

    assert data["week"] == 30
    assert data["trimester"]["trimester"] == 3
    assert data["content"] is None


def test_week_out_of_range(api_client):
    assert api_client.get("/api/baby/weeks/41").status_code == 422
