"""Pydantic schemas for the baby-development view."""

from pydantic import BaseModel, ConfigDict, Field


class TrimesterProgressResponse(BaseModel):
    trimester: int = Field(..., ge=1, le=3)
    percent: float


class PregnancyWeekContent(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    week_number: int
    trimester: int | None = None
    baby_size_comparison: str | None = None
    baby_size_inches: float | None = None
    baby_weight_ounces: float | None = None
    organ_development: str | None = None
    development_highlights: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    next_week_preview: str | None = None


class BabyWeekResponse(BaseModel):
    week: int
    weeks_to_go: int
    trimester: TrimesterProgressResponse
    content: PregnancyWeekContent | None = Field(None, description="Null until content is loaded for this week")
