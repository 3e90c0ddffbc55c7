"""Appointment model: scheduled prenatal visits."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, String, Text, Time, Uuid

from app.db.base import Base


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    title = Column(String(255), nullable=False, default="Appointment")
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    location = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
