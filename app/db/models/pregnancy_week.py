"""PregnancyWeek model: shared week-by-week baby development content."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Float, Integer, Text, Uuid

from app.db.base import Base


class PregnancyWeek(Base):
    __tablename__ = "pregnancy_weeks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    week_number = Column(Integer, unique=True, nullable=False, index=True)
    trimester = Column(Integer, nullable=True)

    baby_size_comparison = Column(Text, nullable=True)  # e.g. "a banana"
    baby_size_inches = Column(Float, nullable=True)
    baby_weight_ounces = Column(Float, nullable=True)

    organ_development = Column(Text, nullable=True)
    development_highlights = Column(JSON, nullable=False, default=list)
    symptoms = Column(JSON, nullable=False, default=list)
    tips = Column(JSON, nullable=False, default=list)
    next_week_preview = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
