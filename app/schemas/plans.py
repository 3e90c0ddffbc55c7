"""Pydantic schemas for pricing plans."""

from typing import Literal

from pydantic import BaseModel, Field


class PlanResponse(BaseModel):
    slug: str
    name: str
    description: str
    period: Literal["month", "year"]
    price: float = Field(..., description="Price in pounds for the period")
    original_price: float | None = Field(None, description="Twelve monthly payments, annual plans only")
    savings: float | None = None
    features: list[str] = Field(default_factory=list)
    popular: bool = False
