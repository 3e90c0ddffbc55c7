"""DashboardService: pregnancy progress for the selected week.

Orchestrates the profile lookup with the pure progress functions; all the
arithmetic lives in app.domain.pregnancy.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.pregnancy import compute_pregnancy_progress, compute_trimester_progress
from app.schemas.baby import TrimesterProgressResponse
from app.schemas.dashboard import DashboardResponse, PregnancyProgressResponse
from app.services.profile_service import ProfileService


class DashboardService:
    async def get_dashboard(
        self,
        session: AsyncSession,
        user_id: str,
        today: date | None = None,
    ) -> DashboardResponse:
        """Progress view for the user's chosen week.

        Until a week is chosen the response only asks the client to show the
        week selector.
        """
        profile = await ProfileService().get_profile(session, user_id)

        if profile.pregnancy_week is None:
            return DashboardResponse(
                needs_week_selection=True,
                stored_due_date=profile.due_date,
                name=profile.name,
                baby_name=profile.baby_name,
            )

        progress = compute_pregnancy_progress(profile.pregnancy_week, today=today)
        trimester = compute_trimester_progress(profile.pregnancy_week)

        return DashboardResponse(
            needs_week_selection=False,
            progress=PregnancyProgressResponse(
                current_week=progress.current_week,
                weeks_remaining=progress.weeks_remaining,
                total_weeks=progress.total_weeks,
                milestone_week=progress.milestone_week,
                milestone_text=progress.milestone_text,
                due_date=progress.due_date,
                percent_complete=progress.percent_complete,
            ),
            trimester=TrimesterProgressResponse(
                trimester=trimester.trimester,
                percent=trimester.percent,
            ),
            stored_due_date=profile.due_date,
            name=profile.name,
            baby_name=profile.baby_name,
        )
