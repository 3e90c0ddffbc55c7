"""Pydantic schemas for diary entries."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mood(str, Enum):
    HAPPY = "happy"
    EXCITED = "excited"
    TIRED = "tired"
    ANXIOUS = "anxious"
    GRATEFUL = "grateful"


class DiaryEntryWrite(BaseModel):
    """Create or full update of a diary entry."""

    title: str = Field(..., max_length=255)
    content: str
    mood: Mood | None = None
    pregnancy_week: int | None = Field(None, ge=1, le=42, description="Defaults to the profile week")
    images: list[str] = Field(default_factory=list, description="Image URLs already uploaded by the client")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class DiaryEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    mood: Mood | None = None
    pregnancy_week: int | None = None
    images: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
