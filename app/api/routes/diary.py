"""Diary endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.diary import DiaryEntryResponse, DiaryEntryWrite
from app.services.diary_service import DiaryService

router = APIRouter()


@router.get("", response_model=list[DiaryEntryResponse])
async def list_entries(user: UserSession = Depends(require_auth)):
    """Entries, newest first."""
    async with get_session_factory()() as session:
        entries = await DiaryService().list_entries(session, user.user_id)
        return [DiaryEntryResponse.model_validate(e) for e in entries]


@router.post("", response_model=DiaryEntryResponse, status_code=201)
async def create_entry(
    body: DiaryEntryWrite,
    user: UserSession = Depends(require_auth),
) -> DiaryEntryResponse:
    """Write an entry. The week defaults to the profile's chosen week."""
    async with get_session_factory()() as session:
        entry = await DiaryService().create_entry(session, user.user_id, body)
        return DiaryEntryResponse.model_validate(entry)


@router.put("/{entry_id}", response_model=DiaryEntryResponse)
async def update_entry(
    entry_id: UUID,
    body: DiaryEntryWrite,
    user: UserSession = Depends(require_auth),
) -> DiaryEntryResponse:
    async with get_session_factory()() as session:
        entry = await DiaryService().update_entry(session, user.user_id, entry_id, body)
        return DiaryEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=204)
async def delete_entry(entry_id: UUID, user: UserSession = Depends(require_auth)) -> None:
    async with get_session_factory()() as session:
        await DiaryService().delete_entry(session, user.user_id, entry_id)
