"""PreferencesService: per-user display settings."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.models.user_preferences import UserPreferences
from app.schemas.preferences import SIDEBAR_COLORS, PreferencesResponse, PreferencesUpdate

logger = structlog.get_logger(__name__)


def to_response(prefs: UserPreferences) -> PreferencesResponse:
    return PreferencesResponse(
        dark_mode=prefs.dark_mode,
        sidebar_color=prefs.sidebar_color,
        sidebar_gradient=SIDEBAR_COLORS.get(prefs.sidebar_color, SIDEBAR_COLORS["purple"]),
    )


class PreferencesService:
    async def get_preferences(self, session: AsyncSession, user_id: str) -> UserPreferences:
        result = await session.execute(
            select(UserPreferences).where(UserPreferences.user_id == user_id)
        )
        prefs = result.scalar_one_or_none()
        if prefs is None:
            prefs = UserPreferences(
                user_id=user_id,
                dark_mode=False,
                sidebar_color=get_settings().default_sidebar_color,
            )
            session.add(prefs)
            await session.commit()
            await session.refresh(prefs)
        return prefs

    async def update_preferences(
        self,
        session: AsyncSession,
        user_id: str,
        update: PreferencesUpdate,
    ) -> UserPreferences:
        """Partial update: only fields sent in the request change."""
        prefs = await self.get_preferences(session, user_id)
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(prefs, field, value)
        await session.commit()
        await session.refresh(prefs)
        logger.info("preferences_updated", user_id=user_id, **changes)
        return prefs
