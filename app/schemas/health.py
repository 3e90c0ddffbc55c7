"""Pydantic schemas for health tracking and weight-gain status."""

import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.domain.weight_gain import WeightGainBand


class HealthEntryCreate(BaseModel):
    weight_kg: float = Field(..., gt=0, le=500)
    date: datetime.date | None = Field(None, description="Defaults to today")
    systolic_bp: int | None = Field(None, gt=0, le=300)
    diastolic_bp: int | None = Field(None, gt=0, le=300)
    heart_rate: int | None = Field(None, gt=0, le=300)
    notes: str | None = None


class HealthEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: datetime.date
    weight_kg: float
    systolic_bp: int | None = None
    diastolic_bp: int | None = None
    heart_rate: int | None = None
    notes: str | None = None
    created_at: datetime.datetime


class HealthEntryInsight(BaseModel):
    entry: HealthEntryResponse
    gain_kg: float
    bmi: float | None = Field(None, description="Null when no positive height is on file")


class WeightGainStatusResponse(BaseModel):
    band: WeightGainBand
    pregnancy_week: int
    current_gain_kg: float
    expected_gain_kg: float
    difference_kg: float
    recommended_total_gain_kg: float
    progress_percent: float = Field(..., description="Gain toward recommended total, capped at 100")
    display_progress_percent: float = Field(..., ge=0, le=100)


class HealthSummaryResponse(BaseModel):
    status: WeightGainStatusResponse
    total_entries: int
    total_gain_kg: float
    current_weight_kg: float | None = None
    entries: list[HealthEntryInsight] = Field(default_factory=list)
