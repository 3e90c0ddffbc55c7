"""Pydantic schemas for the baby checklist."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChecklistItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    text: str
    category: str | None = None
    completed: bool
    is_custom: bool


class ChecklistCategory(BaseModel):
    name: str
    completed: int
    total: int
    items: list[ChecklistItemResponse] = Field(default_factory=list)


class ChecklistResponse(BaseModel):
    completed: int
    total: int
    percent: float = Field(..., ge=0, le=100)
    is_complete: bool
    items: list[ChecklistItemResponse] = Field(default_factory=list)
    categories: list[ChecklistCategory] = Field(default_factory=list)


class ChecklistItemCreate(BaseModel):
    text: str = Field(..., max_length=255)
    category: str | None = Field(None, max_length=100)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text must not be blank")
        return v
