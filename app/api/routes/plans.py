"""Public pricing endpoint."""

from typing import Literal

from fastapi import APIRouter, Query

from app.db.base import get_session_factory
from app.schemas.plans import PlanResponse
from app.services.plan_service import PlanService

router = APIRouter()


@router.get("", response_model=list[PlanResponse])
async def list_plans(period: Literal["month", "year"] = Query("month")):
    """Plan tiers priced for the period. No authentication required."""
    async with get_session_factory()() as session:
        return await PlanService().list_plans(session, period)
