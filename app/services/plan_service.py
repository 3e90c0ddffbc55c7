"""PlanService: pricing tiers for the monthly or annual view."""

from typing import Literal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.plan_tier import PlanTier
from app.schemas.plans import PlanResponse


def _pounds(pence: int) -> float:
    return round(pence / 100, 2)


def to_plan(tier: PlanTier, period: Literal["month", "year"]) -> PlanResponse:
    """Price a tier for the period. Annual plans report savings over 12 monthly payments."""
    if period == "month":
        return PlanResponse(
            slug=tier.slug,
            name=tier.name,
            description=tier.description,
            period=period,
            price=_pounds(tier.price_monthly_pence),
            features=list(tier.features or []),
            popular=tier.popular,
        )

    original = tier.price_monthly_pence * 12
    has_discount = tier.price_yearly_pence < original
    return PlanResponse(
        slug=tier.slug,
        name=tier.name,
        description=tier.description,
        period=period,
        price=_pounds(tier.price_yearly_pence),
        original_price=_pounds(original) if has_discount else None,
        savings=_pounds(original - tier.price_yearly_pence) if has_discount else None,
        features=list(tier.features or []),
        popular=tier.popular,
    )


class PlanService:
    async def list_plans(self, session: AsyncSession, period: Literal["month", "year"]) -> list[PlanResponse]:
        result = await session.execute(select(PlanTier).order_by(PlanTier.sort_order.asc()))
        return [to_plan(tier, period) for tier in result.scalars().all()]
