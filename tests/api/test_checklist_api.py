"""Integration tests for the baby checklist."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.checklist import essential_items

pytestmark = pytest.mark.integration


def test_first_visit_seeds_catalog(api_client):
    data = api_client.get("/api/checklist").json()

    assert data["total"] == len(essential_items())
    assert data["completed"] == 0
    assert data["percent"] == 0
    assert data["is_complete"] is False
    assert data["items"][0]["text"] == "Baby bottles"
    assert data["categories"][0]["name"] == "Feeding"


def test_second_visit_does_not_reseed(api_client):
    api_client.get("/api/checklist")
    data = api_client.get("/api/checklist").json()

    assert data["total"] == len(essential_items())


def test_add_custom_item(api_client):
    api_client.get("/api/checklist")

    response = api_client.post("/api/checklist", json={"text": "  Nursing pillow  "})

    assert response.status_code == 201
    item = response.json()
    assert item["text"] == "Nursing pillow"
    assert item["is_custom"] is True

    data = api_client.get("/api/checklist").json()
    assert data["items"][-1]["text"] == "Nursing pillow"
    assert data["categories"][-1]["name"] == "Custom"


def test_custom_item_before_first_visit_keeps_catalog(api_client):
    assert api_client.post("/api/checklist", json={"text": "Sling"}).status_code == 201

    data = api_client.get("/api/checklist").json()

    assert data["total"] == len(essential_items()) + 1
    assert data["items"][0]["text"] == "Baby bottles"
    assert data["items"][-1]["text"] == "Sling"


def test_blank_custom_item_rejected(api_client):
    assert api_client.post("/api/checklist", json={"text": "   "}).status_code == 422


def test_toggle_updates_progress(api_client):
    first = api_client.get("/api/checklist").json()["items"][0]

    toggled = api_client.post(f"/api/checklist/{first['id']}/toggle").json()
    assert toggled["completed"] is True

    data = api_client.get("/api/checklist").json()
    assert data["completed"] == 1

    untoggled = api_client.post(f"/api/checklist/{first['id']}/toggle").json()
    assert untoggled["completed"] is False


def test_toggle_commit_failure_returns_restored_item(api_client, monkeypatch):
    first = api_client.get("/api/checklist").json()["items"][0]

    async def failing_commit(self):
        raise OperationalError("UPDATE checklist_items", {}, Exception("database is locked"))

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)
    response = api_client.post(f"/api/checklist/{first['id']}/toggle")
    monkeypatch.undo()

    assert response.status_code == 503
    detail = response.json()["detail"]
    assert detail["item"]["id"] == first["id"]
    assert detail["item"]["completed"] is False

    data = api_client.get("/api/checklist").json()
    assert data["completed"] == 0


def test_toggle_unknown_item_404(api_client):
    assert api_client.post(f"/api/checklist/{uuid.uuid4()}/toggle").status_code == 404


def test_only_custom_items_removable(api_client):
    essential = api_client.get("/api/checklist").json()["items"][0]
    custom = api_client.post("/api/checklist", json={"text": "Sling", "category": "Transportation"}).json()

    refused = api_client.delete(f"/api/checklist/{essential['id']}")
    assert refused.status_code == 400
    assert refused.json()["detail"] == "Only custom items can be removed"

    assert api_client.delete(f"/api/checklist/{custom['id']}").status_code == 204
    assert api_client.get("/api/checklist").json()["total"] == len(essential_items())
