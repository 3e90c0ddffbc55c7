"""Load shared content (FAQs and pregnancy weeks) from a JSON document.

Expected shape::

    {
      "faqs": [{"question": ..., "answer": ..., "category": ..., "order_index": 0}],
      "pregnancy_weeks": [{"week_number": 12, "trimester": 1, ...}]
    }

Both sections are optional. FAQs are matched on question text and weeks on
week_number, so loading the same file twice updates rows in place.
"""

from dataclasses import dataclass

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.faq import Faq
from app.db.models.pregnancy_week import PregnancyWeek

logger = structlog.get_logger(__name__)

FAQ_FIELDS = ("question", "answer", "category", "order_index", "is_published")
WEEK_FIELDS = (
    "week_number",
    "trimester",
    "baby_size_comparison",
    "baby_size_inches",
    "baby_weight_ounces",
    "organ_development",
    "development_highlights",
    "symptoms",
    "tips",
    "next_week_preview",
)


@dataclass
class LoadReport:
    faqs_created: int = 0
    faqs_updated: int = 0
    weeks_created: int = 0
    weeks_updated: int = 0


def _pick(record: dict, fields: tuple[str, ...]) -> dict:
    return {k: record[k] for k in fields if k in record}


async def load_content(session: AsyncSession, document: dict) -> LoadReport:
    """Upsert every FAQ and week in ``document`` and commit once."""
    report = LoadReport()

    for record in document.get("faqs", []):
        values = _pick(record, FAQ_FIELDS)
        if not values.get("question") or not values.get("answer"):
            raise ValueError("FAQ records need both question and answer")

        existing = (
            await session.execute(select(Faq).where(Faq.question == values["question"]))
        ).scalar_one_or_none()
        if existing is None:
            session.add(Faq(**values))
            report.faqs_created += 1
        else:
            for field, value in values.items():
                setattr(existing, field, value)
            report.faqs_updated += 1

    for record in document.get("pregnancy_weeks", []):
        values = _pick(record, WEEK_FIELDS)
        week = values.get("week_number")
        if not isinstance(week, int) or not 1 <= week <= 42:
            raise ValueError(f"Invalid week_number: {week!r}")

        existing = (
            await session.execute(select(PregnancyWeek).where(PregnancyWeek.week_number == week))
        ).scalar_one_or_none()
        if existing is None:
            session.add(PregnancyWeek(**values))
            report.weeks_created += 1
        else:
            for field, value in values.items():
                setattr(existing, field, value)
            report.weeks_updated += 1

    await session.commit()
    logger.info(
        "content_loaded",
        faqs_created=report.faqs_created,
        faqs_updated=report.faqs_updated,
        weeks_created=report.weeks_created,
        weeks_updated=report.weeks_updated,
    )
    return report
