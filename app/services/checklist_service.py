"""ChecklistService: baby-essentials checklist with custom items.

The catalog is copied into the user's rows on first access. Toggling goes
through the optimistic-mutation helper so a failed commit hands back the
restored item instead of a half-applied one.
"""

from uuid import UUID

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidOperationError, PersistenceError, RecordNotFoundError
from app.db.models.checklist_item import ChecklistItem
from app.domain.checklist import checklist_progress, essential_items, group_by_category
from app.domain.mutations import TOGGLE_COMPLETED, UpdateResult, apply_with_rollback
from app.schemas.checklist import (
    ChecklistCategory,
    ChecklistItemCreate,
    ChecklistItemResponse,
    ChecklistResponse,
)

logger = structlog.get_logger(__name__)


def _snapshot(item: ChecklistItem) -> dict:
    return {
        "id": item.id,
        "text": item.text,
        "category": item.category,
        "completed": item.completed,
        "is_custom": item.is_custom,
    }


class ChecklistService:
    async def _load_items(self, session: AsyncSession, user_id: str) -> list[ChecklistItem]:
        result = await session.execute(
            select(ChecklistItem)
            .where(ChecklistItem.user_id == user_id)
            .order_by(ChecklistItem.position.asc(), ChecklistItem.created_at.asc())
        )
        return list(result.scalars().all())

    async def _get_owned(self, session: AsyncSession, user_id: str, item_id: UUID) -> ChecklistItem:
        result = await session.execute(
            select(ChecklistItem).where(
                ChecklistItem.id == item_id,
                ChecklistItem.user_id == user_id,
            )
        )
        item = result.scalar_one_or_none()
        if item is None:
            raise RecordNotFoundError("Checklist item", item_id)
        return item

    async def seed_essentials(self, session: AsyncSession, user_id: str) -> int:
        """Copy the essentials catalog into the user's checklist.

        Custom items already on the list move below the catalog. Returns the
        number of essentials inserted, 0 if a concurrent request seeded first.
        """
        essentials = essential_items()
        await session.execute(
            update(ChecklistItem)
            .where(ChecklistItem.user_id == user_id, ChecklistItem.is_custom.is_(True))
            .values(position=ChecklistItem.position + len(essentials))
        )
        for position, (category, text) in enumerate(essentials):
            session.add(
                ChecklistItem(
                    user_id=user_id,
                    text=text,
                    category=category,
                    completed=False,
                    is_custom=False,
                    position=position,
                )
            )
        try:
            await session.commit()
        except IntegrityError:
            # Another request seeded the same user first
            await session.rollback()
            logger.info("checklist_seed_skipped", user_id=user_id)
            return 0
        logger.info("checklist_seeded", user_id=user_id, count=len(essentials))
        return len(essentials)

    async def ensure_seeded(self, session: AsyncSession, user_id: str) -> int:
        """Seed the catalog unless the user already has its essentials."""
        essentials_count = await session.scalar(
            select(func.count())
            .select_from(ChecklistItem)
            .where(ChecklistItem.user_id == user_id, ChecklistItem.is_custom.is_(False))
        )
        if essentials_count:
            return 0
        return await self.seed_essentials(session, user_id)

    async def get_checklist(self, session: AsyncSession, user_id: str) -> ChecklistResponse:
        """Return items, overall progress and per-category groups.

        Seeds the catalog on first access.
        """
        await self.ensure_seeded(session, user_id)
        items = await self._load_items(session, user_id)

        progress = checklist_progress(items)
        categories = [
            ChecklistCategory(
                name=name,
                completed=checklist_progress(members).completed,
                total=len(members),
                items=[ChecklistItemResponse.model_validate(i) for i in members],
            )
            for name, members in group_by_category(items).items()
        ]

        return ChecklistResponse(
            completed=progress.completed,
            total=progress.total,
            percent=progress.percent,
            is_complete=progress.is_complete,
            items=[ChecklistItemResponse.model_validate(i) for i in items],
            categories=categories,
        )

    async def add_custom_item(
        self,
        session: AsyncSession,
        user_id: str,
        data: ChecklistItemCreate,
    ) -> ChecklistItem:
        """Append a user-defined item after everything already on the list."""
        await self.ensure_seeded(session, user_id)
        max_position = (
            await session.execute(
                select(func.max(ChecklistItem.position)).where(ChecklistItem.user_id == user_id)
            )
        ).scalar()

        item = ChecklistItem(
            user_id=user_id,
            text=data.text,
            category=data.category,
            completed=False,
            is_custom=True,
            position=(max_position if max_position is not None else -1) + 1,
        )
        session.add(item)
        await session.commit()
        await session.refresh(item)
        logger.info("checklist_item_added", user_id=user_id, item_id=str(item.id))
        return item

    async def toggle_item(
        self,
        session: AsyncSession,
        user_id: str,
        item_id: UUID,
    ) -> UpdateResult[dict]:
        """Flip ``completed``; on commit failure return the restored state."""
        item = await self._get_owned(session, user_id, item_id)

        async def commit(state: dict) -> None:
            item.completed = state["completed"]
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError("Failed to update checklist item") from e

        result = await apply_with_rollback(_snapshot(item), TOGGLE_COMPLETED, commit)
        if result.success:
            logger.info(
                "checklist_item_toggled",
                user_id=user_id,
                item_id=str(item_id),
                completed=result.state["completed"],
            )
        return result

    async def remove_item(self, session: AsyncSession, user_id: str, item_id: UUID) -> None:
        """Delete a custom item. Catalog essentials cannot be removed."""
        item = await self._get_owned(session, user_id, item_id)
        if not item.is_custom:
            raise InvalidOperationError("Only custom items can be removed")

        await session.delete(item)
        await session.commit()
        logger.info("checklist_item_removed", user_id=user_id, item_id=str(item_id))
