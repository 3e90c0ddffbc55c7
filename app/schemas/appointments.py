"""Pydantic schemas for appointments."""

import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppointmentCreate(BaseModel):
    date: datetime.date
    time: datetime.time
    location: str = Field(..., max_length=255)
    title: str = Field("Appointment", max_length=255)
    notes: str | None = None

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("location must not be blank")
        return v


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    date: datetime.date
    time: datetime.time
    location: str
    notes: str | None = None
    created_at: datetime.datetime
