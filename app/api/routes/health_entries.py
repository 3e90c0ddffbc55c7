"""Health tracking endpoints.

GET    /api/health-entries           - Entries, oldest first
POST   /api/health-entries           - Record weight and blood pressure
GET    /api/health-entries/summary   - Weight-gain status with per-entry BMI
DELETE /api/health-entries/{id}      - Remove an entry
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.health import HealthEntryCreate, HealthEntryResponse, HealthSummaryResponse
from app.services.health_service import HealthService

router = APIRouter()


@router.get("", response_model=list[HealthEntryResponse])
async def list_entries(user: UserSession = Depends(require_auth)):
    async with get_session_factory()() as session:
        entries = await HealthService().list_entries(session, user.user_id)
        return [HealthEntryResponse.model_validate(e) for e in entries]


@router.post("", response_model=HealthEntryResponse, status_code=201)
async def add_entry(
    body: HealthEntryCreate,
    user: UserSession = Depends(require_auth),
) -> HealthEntryResponse:
    async with get_session_factory()() as session:
        entry = await HealthService().add_entry(session, user.user_id, body)
        return HealthEntryResponse.model_validate(entry)


@router.get("/summary", response_model=HealthSummaryResponse)
async def get_summary(user: UserSession = Depends(require_auth)) -> HealthSummaryResponse:
    """Weight-gain band for the week derived from the stored due date."""
    async with get_session_factory()() as session:
        return await HealthService().get_summary(session, user.user_id)


@router.delete("/{entry_id}", status_code=204)
async def delete_entry(entry_id: UUID, user: UserSession = Depends(require_auth)) -> None:
    async with get_session_factory()() as session:
        await HealthService().delete_entry(session, user.user_id, entry_id)
