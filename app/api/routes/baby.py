"""Baby development endpoints.

GET /api/baby               - Content for the user's current week
GET /api/baby/weeks/{week}  - Content for any week 1-40
"""

from fastapi import APIRouter, Depends, Path

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.domain.pregnancy import TOTAL_WEEKS
from app.schemas.baby import BabyWeekResponse
from app.services.baby_service import BabyService

router = APIRouter()


@router.get("", response_model=BabyWeekResponse)
async def get_current_week(user: UserSession = Depends(require_auth)) -> BabyWeekResponse:
    async with get_session_factory()() as session:
        return await BabyService().get_current_week(session, user.user_id)


@router.get("/weeks/{week}", response_model=BabyWeekResponse)
async def get_week(
    week: int = Path(..., ge=1, le=TOTAL_WEEKS),
    user: UserSession = Depends(require_auth),
) -> BabyWeekResponse:
    async with get_session_factory()() as session:
        return await BabyService().get_week(session, week)
