"""User provisioning on first login.

Creates the Profile (with default baseline) and UserPreferences rows for a
new user. Safe to call repeatedly; a concurrent insert that loses the race
on the unique user_id is treated as already provisioned.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.base import get_session_factory
from app.db.models.profile import Profile
from app.db.models.user_preferences import UserPreferences

logger = structlog.get_logger(__name__)


async def provision_user_on_first_login(
    user_id: str,
    session: AsyncSession | None = None,
) -> Profile:
    """Ensure Profile and UserPreferences exist for ``user_id``.

    Args:
        user_id: Subject claim from the verified JWT
        session: Optional AsyncSession for testing (if None, creates new session)

    Returns:
        The user's Profile (newly created or existing)
    """
    if session is not None:
        return await _do_provision(user_id, session)

    factory = get_session_factory()
    async with factory() as session:
        return await _do_provision(user_id, session)


async def _do_provision(user_id: str, session: AsyncSession) -> Profile:
    settings = get_settings()

    profile = (
        await session.execute(select(Profile).where(Profile.user_id == user_id))
    ).scalar_one_or_none()
    if profile is None:
        session.add(
            Profile(
                user_id=user_id,
                height_cm=settings.default_height_cm,
                age_years=settings.default_age_years,
                pre_pregnancy_weight_kg=settings.default_pre_pregnancy_weight_kg,
            )
        )

    prefs = (
        await session.execute(select(UserPreferences).where(UserPreferences.user_id == user_id))
    ).scalar_one_or_none()
    if prefs is None:
        session.add(
            UserPreferences(
                user_id=user_id,
                dark_mode=False,
                sidebar_color=settings.default_sidebar_color,
            )
        )

    if profile is None or prefs is None:
        try:
            await session.commit()
            logger.info("user_provisioned", user_id=user_id)
        except IntegrityError:
            # Another request provisioned the same user first
            await session.rollback()

    result = await session.execute(select(Profile).where(Profile.user_id == user_id))
    return result.scalar_one()
