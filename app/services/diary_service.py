"""DiaryService: journal entries, newest first."""

from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import RecordNotFoundError
from app.db.models.diary_entry import DiaryEntry
from app.schemas.diary import DiaryEntryWrite
from app.services.profile_service import ProfileService

logger = structlog.get_logger(__name__)


class DiaryService:
    async def list_entries(self, session: AsyncSession, user_id: str) -> list[DiaryEntry]:
        result = await session.execute(
            select(DiaryEntry)
            .where(DiaryEntry.user_id == user_id)
            .order_by(DiaryEntry.created_at.desc())
        )
        return list(result.scalars().all())

    async def _get_owned(self, session: AsyncSession, user_id: str, entry_id: UUID) -> DiaryEntry:
        result = await session.execute(
            select(DiaryEntry).where(
                DiaryEntry.id == entry_id,
                DiaryEntry.user_id == user_id,
            )
        )
        entry = result.scalar_one_or_none()
        if entry is None:
            raise RecordNotFoundError("Diary entry", entry_id)
        return entry

    async def _default_week(self, session: AsyncSession, user_id: str) -> int | None:
        profile = await ProfileService().get_profile(session, user_id)
        return profile.pregnancy_week

    async def create_entry(self, session: AsyncSession, user_id: str, data: DiaryEntryWrite) -> DiaryEntry:
        week = data.pregnancy_week
        if week is None:
            week = await self._default_week(session, user_id)

        entry = DiaryEntry(
            user_id=user_id,
            title=data.title,
            content=data.content,
            images=list(data.images),
            mood=data.mood.value if data.mood else None,
            pregnancy_week=week,
        )
        session.add(entry)
        await session.commit()
        await session.refresh(entry)
        logger.info("diary_entry_created", user_id=user_id, entry_id=str(entry.id))
        return entry

    async def update_entry(
        self,
        session: AsyncSession,
        user_id: str,
        entry_id: UUID,
        data: DiaryEntryWrite,
    ) -> DiaryEntry:
        """Replace the entry's content. An omitted week keeps the stored one."""
        entry = await self._get_owned(session, user_id, entry_id)

        entry.title = data.title
        entry.content = data.content
        entry.images = list(data.images)
        entry.mood = data.mood.value if data.mood else None
        if data.pregnancy_week is not None:
            entry.pregnancy_week = data.pregnancy_week

        await session.commit()
        await session.refresh(entry)
        logger.info("diary_entry_updated", user_id=user_id, entry_id=str(entry_id))
        return entry

    async def delete_entry(self, session: AsyncSession, user_id: str, entry_id: UUID) -> None:
        entry = await self._get_owned(session, user_id, entry_id)
        await session.delete(entry)
        await session.commit()
        logger.info("diary_entry_deleted", user_id=user_id, entry_id=str(entry_id))
