"""Pydantic schemas for the knowledge base."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FaqResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    question: str
    answer: str
    category: str | None = None


class KnowledgeResponse(BaseModel):
    faqs: list[FaqResponse] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list, description="All published categories, unfiltered")
    total: int = Field(..., description="Published FAQ count before filtering")
