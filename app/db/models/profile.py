"""Profile model: identity fields plus the pre-pregnancy baseline."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text, Uuid

from app.db.base import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), unique=True, nullable=False, index=True)

    # Identity
    name = Column(String(255), nullable=True)
    baby_name = Column(String(255), nullable=True)
    profile_picture_url = Column(Text, nullable=True)

    # Set by the week selector; 1-42
    pregnancy_week = Column(Integer, nullable=True)

    # Baseline
    height_cm = Column(Float, nullable=True)
    age_years = Column(Integer, nullable=True)
    pre_pregnancy_weight_kg = Column(Float, nullable=True)
    due_date = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
