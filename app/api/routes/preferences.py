"""Display preference endpoints."""

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.preferences import PreferencesResponse, PreferencesUpdate
from app.services.preferences_service import PreferencesService, to_response

router = APIRouter()


@router.get("", response_model=PreferencesResponse)
async def get_preferences(user: UserSession = Depends(require_auth)) -> PreferencesResponse:
    async with get_session_factory()() as session:
        prefs = await PreferencesService().get_preferences(session, user.user_id)
        return to_response(prefs)


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    body: PreferencesUpdate,
    user: UserSession = Depends(require_auth),
) -> PreferencesResponse:
    """Change dark mode and/or sidebar colour. Omitted fields are kept."""
    async with get_session_factory()() as session:
        prefs = await PreferencesService().update_preferences(session, user.user_id, body)
        return to_response(prefs)
