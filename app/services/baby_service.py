"""BabyService: week-by-week development content plus trimester progress."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.models.pregnancy_week import PregnancyWeek
from app.domain.pregnancy import TOTAL_WEEKS, compute_trimester_progress
from app.schemas.baby import BabyWeekResponse, PregnancyWeekContent, TrimesterProgressResponse
from app.services.profile_service import ProfileService


class BabyService:
    async def get_week(self, session: AsyncSession, week: int) -> BabyWeekResponse:
        """Content for ``week``; ``content`` is None when no row exists yet."""
        result = await session.execute(
            select(PregnancyWeek).where(PregnancyWeek.week_number == week)
        )
        row = result.scalar_one_or_none()
        trimester = compute_trimester_progress(week)

        return BabyWeekResponse(
            week=week,
            weeks_to_go=TOTAL_WEEKS - week,
            trimester=TrimesterProgressResponse(
                trimester=trimester.trimester,
                percent=trimester.percent,
            ),
            content=PregnancyWeekContent.model_validate(row) if row is not None else None,
        )

    async def get_current_week(self, session: AsyncSession, user_id: str) -> BabyWeekResponse:
        """Content for the profile's week, or the configured default week."""
        profile = await ProfileService().get_profile(session, user_id)
        week = profile.pregnancy_week or get_settings().default_baby_week
        return await self.get_week(session, week)
