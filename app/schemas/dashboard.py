"""Pydantic schemas for the dashboard."""

from datetime import date

from pydantic import BaseModel, Field

from app.schemas.baby import TrimesterProgressResponse


class PregnancyProgressResponse(BaseModel):
    current_week: int
    weeks_remaining: int = Field(..., ge=0)
    total_weeks: int
    milestone_week: int
    milestone_text: str
    due_date: date = Field(..., description="Today plus the remaining weeks")
    percent_complete: float = Field(..., ge=0, description="Not capped above 100 past week 40")


class DashboardResponse(BaseModel):
    """Dashboard payload. ``progress`` is null until a week has been chosen."""

    needs_week_selection: bool
    progress: PregnancyProgressResponse | None = None
    trimester: TrimesterProgressResponse | None = None
    stored_due_date: date | None = Field(None, description="Due date saved on the profile, if any")
    name: str | None = None
    baby_name: str | None = None
