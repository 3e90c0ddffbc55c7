"""DiaryEntry model: journal entries with optional mood and image URLs."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, Uuid

from app.db.base import Base


class DiaryEntry(Base):
    __tablename__ = "diary_entries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    images = Column(JSON, nullable=False, default=list)  # ["https://..."]
    mood = Column(String(50), nullable=True)  # Mood enum values
    pregnancy_week = Column(Integer, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
