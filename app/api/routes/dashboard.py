"""Dashboard API endpoint.

GET /api/dashboard - Pregnancy progress for the selected week
"""

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(user: UserSession = Depends(require_auth)) -> DashboardResponse:
    """Progress, milestone and trimester for the user's chosen week.

    ``needs_week_selection`` is true until a week has been picked.
    """
    session_factory = get_session_factory()

    async with session_factory() as session:
        service = DashboardService()
        return await service.get_dashboard(session=session, user_id=user.user_id)
