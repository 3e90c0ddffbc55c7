"""HealthService: weight / blood-pressure log and weight-gain summary.

Loads observations and baseline, then hands them to the weight_gain
domain functions.
"""

from datetime import date
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import RecordNotFoundError
from app.db.models.health_entry import HealthEntry
from app.domain.weight_gain import HealthObservation, summarize_health
from app.schemas.health import (
    HealthEntryCreate,
    HealthEntryInsight,
    HealthEntryResponse,
    HealthSummaryResponse,
    WeightGainStatusResponse,
)
from app.services.profile_service import ProfileService, health_tracking_week, to_baseline

logger = structlog.get_logger(__name__)


def _to_observation(entry: HealthEntry) -> HealthObservation:
    return HealthObservation(
        date=entry.date,
        weight_kg=entry.weight_kg,
        systolic_bp=entry.systolic_bp,
        diastolic_bp=entry.diastolic_bp,
        notes=entry.notes,
    )


class HealthService:
    async def list_entries(self, session: AsyncSession, user_id: str) -> list[HealthEntry]:
        """All entries for the user, oldest first."""
        result = await session.execute(
            select(HealthEntry)
            .where(HealthEntry.user_id == user_id)
            .order_by(HealthEntry.date.asc(), HealthEntry.created_at.asc())
        )
        return list(result.scalars().all())

    async def add_entry(
        self,
        session: AsyncSession,
        user_id: str,
        data: HealthEntryCreate,
        today: date | None = None,
    ) -> HealthEntry:
        entry = HealthEntry(
            user_id=user_id,
            date=data.date or today or date.today(),
            weight_kg=data.weight_kg,
            systolic_bp=data.systolic_bp,
            diastolic_bp=data.diastolic_bp,
            heart_rate=data.heart_rate,
            notes=data.notes or None,
        )
        session.add(entry)
        await session.commit()
        await session.refresh(entry)
        logger.info("health_entry_added", user_id=user_id, entry_id=str(entry.id))
        return entry

    async def delete_entry(self, session: AsyncSession, user_id: str, entry_id: UUID) -> None:
        result = await session.execute(
            select(HealthEntry).where(
                HealthEntry.id == entry_id,
                HealthEntry.user_id == user_id,
            )
        )
        entry = result.scalar_one_or_none()
        if entry is None:
            raise RecordNotFoundError("Health entry", entry_id)

        await session.delete(entry)
        await session.commit()
        logger.info("health_entry_deleted", user_id=user_id, entry_id=str(entry_id))

    async def get_summary(
        self,
        session: AsyncSession,
        user_id: str,
        today: date | None = None,
    ) -> HealthSummaryResponse:
        """Weight-gain status, per-entry BMI and headline totals."""
        profile = await ProfileService().get_profile(session, user_id)
        entries = await self.list_entries(session, user_id)

        summary = summarize_health(
            [_to_observation(e) for e in entries],
            to_baseline(profile),
            health_tracking_week(profile, today=today),
        )
        status = summary.status

        return HealthSummaryResponse(
            status=WeightGainStatusResponse(
                band=status.band,
                pregnancy_week=status.pregnancy_week,
                current_gain_kg=status.current_gain_kg,
                expected_gain_kg=status.expected_gain_kg,
                difference_kg=status.difference_kg,
                recommended_total_gain_kg=status.recommended_total_gain_kg,
                progress_percent=status.progress_percent,
                display_progress_percent=status.display_progress_percent,
            ),
            total_entries=summary.total_entries,
            total_gain_kg=summary.total_gain_kg,
            current_weight_kg=summary.current_weight_kg,
            entries=[
                HealthEntryInsight(
                    entry=HealthEntryResponse.model_validate(entry),
                    gain_kg=insight.gain_kg,
                    bmi=insight.bmi,
                )
                for entry, insight in zip(entries, summary.entries)
            ],
        )
