"""Pydantic schemas for profile and baseline."""

from datetime import date

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    name: str | None = None
    baby_name: str | None = None
    profile_picture_url: str | None = None
    pregnancy_week: int | None = Field(None, description="Week chosen in the week selector (1-42)")
    height_cm: float
    age_years: int
    pre_pregnancy_weight_kg: float
    due_date: date | None = None


class ProfileUpdate(BaseModel):
    """Full-form save of profile and baseline. Omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=255)
    baby_name: str | None = Field(None, max_length=255)
    profile_picture_url: str | None = None
    height_cm: float | None = Field(None, gt=0, le=300)
    age_years: int | None = Field(None, ge=0, le=120)
    pre_pregnancy_weight_kg: float | None = Field(None, gt=0, le=500)
    due_date: date | None = None


class WeekUpdate(BaseModel):
    week: int = Field(..., ge=1, le=42, description="Completed weeks of pregnancy")
