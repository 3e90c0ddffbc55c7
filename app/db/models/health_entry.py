"""HealthEntry model: one dated weight / blood-pressure observation."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text, Uuid

from app.db.base import Base


class HealthEntry(Base):
    __tablename__ = "health_entries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    date = Column(Date, nullable=False, index=True)
    weight_kg = Column(Float, nullable=False)
    systolic_bp = Column(Integer, nullable=True)
    diastolic_bp = Column(Integer, nullable=True)
    heart_rate = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
