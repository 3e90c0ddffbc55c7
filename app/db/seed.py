"""Idempotent seed data for plan tiers."""

from sqlalchemy import select

from app.db.base import get_session_factory
from app.db.models.plan_tier import PlanTier

PLAN_TIERS = [
    {
        "slug": "free",
        "name": "Free",
        "description": "Perfect for getting started",
        "price_monthly_pence": 0,
        "price_yearly_pence": 0,
        "features": [
            "Basic pregnancy tracking",
            "Weekly milestones",
            "Simple checklist",
            "Community support",
            "Basic appointments",
        ],
        "popular": False,
        "sort_order": 0,
    },
    {
        "slug": "gold",
        "name": "Gold",
        "description": "Most popular choice",
        "price_monthly_pence": 499,
        "price_yearly_pence": 4000,
        "features": [
            "Everything in Free",
            "Advanced analytics",
            "Priority support",
            "Custom reminders",
            "Photo gallery",
            "Export data",
            "Ad-free experience",
        ],
        "popular": True,
        "sort_order": 1,
    },
    {
        "slug": "deluxe",
        "name": "Deluxe",
        "description": "For the ultimate experience",
        "price_monthly_pence": 899,
        "price_yearly_pence": 8000,
        "features": [
            "Everything in Gold",
            "Personal coach access",
            "Advanced insights",
            "Partner sharing",
            "Premium content",
            "24/7 support",
            "Early access to features",
        ],
        "popular": False,
        "sort_order": 2,
    },
]


async def seed_plan_tiers() -> None:
    """Insert default plan tiers if they don't already exist."""
    factory = get_session_factory()

    async with factory() as session:
        for tier_data in PLAN_TIERS:
            result = await session.execute(
                select(PlanTier).where(PlanTier.slug == tier_data["slug"])
            )
            if result.scalar_one_or_none() is None:
                session.add(PlanTier(**tier_data))

        await session.commit()
