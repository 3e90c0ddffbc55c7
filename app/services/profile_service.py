"""ProfileService: profile, baseline and week selection."""

from datetime import date

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.provisioning import provision_user_on_first_login
from app.db.models.profile import Profile
from app.domain.pregnancy import week_from_due_date
from app.domain.weight_gain import PersonalBaseline
from app.schemas.profile import ProfileResponse, ProfileUpdate

logger = structlog.get_logger(__name__)


def to_baseline(profile: Profile) -> PersonalBaseline:
    """Build the domain baseline, filling unset fields with configured defaults."""
    settings = get_settings()
    return PersonalBaseline(
        height_cm=profile.height_cm if profile.height_cm is not None else settings.default_height_cm,
        age_years=profile.age_years if profile.age_years is not None else settings.default_age_years,
        pre_pregnancy_weight_kg=(
            profile.pre_pregnancy_weight_kg
            if profile.pre_pregnancy_weight_kg is not None
            else settings.default_pre_pregnancy_weight_kg
        ),
        due_date=profile.due_date,
    )


def health_tracking_week(profile: Profile, today: date | None = None) -> int:
    """Week used by health tracking: derived from the stored due date, else 0."""
    if profile.due_date is None:
        return 0
    return week_from_due_date(profile.due_date, today=today)


def to_response(profile: Profile) -> ProfileResponse:
    baseline = to_baseline(profile)
    return ProfileResponse(
        name=profile.name,
        baby_name=profile.baby_name,
        profile_picture_url=profile.profile_picture_url,
        pregnancy_week=profile.pregnancy_week,
        height_cm=baseline.height_cm,
        age_years=baseline.age_years,
        pre_pregnancy_weight_kg=baseline.pre_pregnancy_weight_kg,
        due_date=profile.due_date,
    )


class ProfileService:
    async def get_profile(self, session: AsyncSession, user_id: str) -> Profile:
        """Return the user's profile, provisioning it if missing."""
        result = await session.execute(select(Profile).where(Profile.user_id == user_id))
        profile = result.scalar_one_or_none()
        if profile is None:
            profile = await provision_user_on_first_login(user_id, session=session)
        return profile

    async def update_profile(self, session: AsyncSession, user_id: str, update: ProfileUpdate) -> Profile:
        """Upsert: apply every field present in the request body."""
        profile = await self.get_profile(session, user_id)
        changes = update.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(profile, field, value)
        await session.commit()
        await session.refresh(profile)
        logger.info("profile_updated", user_id=user_id, fields=sorted(changes))
        return profile

    async def set_week(self, session: AsyncSession, user_id: str, week: int) -> Profile:
        profile = await self.get_profile(session, user_id)
        profile.pregnancy_week = week
        await session.commit()
        await session.refresh(profile)
        logger.info("pregnancy_week_set", user_id=user_id, week=week)
        return profile
