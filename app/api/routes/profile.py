"""Profile and week-selection endpoints.

GET /api/profile       - Profile with baseline (defaults filled in)
PUT /api/profile       - Save profile and baseline
PUT /api/profile/week  - Choose the current pregnancy week
"""

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.profile import ProfileResponse, ProfileUpdate, WeekUpdate
from app.services.profile_service import ProfileService, to_response

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def get_profile(user: UserSession = Depends(require_auth)) -> ProfileResponse:
    async with get_session_factory()() as session:
        profile = await ProfileService().get_profile(session, user.user_id)
        return to_response(profile)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdate,
    user: UserSession = Depends(require_auth),
) -> ProfileResponse:
    async with get_session_factory()() as session:
        profile = await ProfileService().update_profile(session, user.user_id, body)
        return to_response(profile)


@router.put("/week", response_model=ProfileResponse)
async def set_week(
    body: WeekUpdate,
    user: UserSession = Depends(require_auth),
) -> ProfileResponse:
    async with get_session_factory()() as session:
        profile = await ProfileService().set_week(session, user.user_id, body.week)
        return to_response(profile)
