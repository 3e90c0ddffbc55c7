"""AppointmentService: upcoming visits, soonest first."""

from datetime import date
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidOperationError, RecordNotFoundError
from app.db.models.appointment import Appointment
from app.schemas.appointments import AppointmentCreate

logger = structlog.get_logger(__name__)


class AppointmentService:
    async def list_appointments(self, session: AsyncSession, user_id: str) -> list[Appointment]:
        result = await session.execute(
            select(Appointment)
            .where(Appointment.user_id == user_id)
            .order_by(Appointment.date.asc(), Appointment.time.asc())
        )
        return list(result.scalars().all())

    async def add_appointment(
        self,
        session: AsyncSession,
        user_id: str,
        data: AppointmentCreate,
        today: date | None = None,
    ) -> Appointment:
        """Schedule a visit. Dates before today are rejected.

        Today itself is accepted, so a same-day visit can still be booked
        after its time has passed.
        """
        if today is None:
            today = date.today()
        if data.date < today:
            raise InvalidOperationError("Appointment date cannot be in the past")

        appointment = Appointment(
            user_id=user_id,
            title=data.title.strip() or "Appointment",
            date=data.date,
            time=data.time,
            location=data.location,
            notes=data.notes or None,
        )
        session.add(appointment)
        await session.commit()
        await session.refresh(appointment)
        logger.info("appointment_added", user_id=user_id, appointment_id=str(appointment.id))
        return appointment

    async def delete_appointment(self, session: AsyncSession, user_id: str, appointment_id: UUID) -> None:
        result = await session.execute(
            select(Appointment).where(
                Appointment.id == appointment_id,
                Appointment.user_id == user_id,
            )
        )
        appointment = result.scalar_one_or_none()
        if appointment is None:
            raise RecordNotFoundError("Appointment", appointment_id)

        await session.delete(appointment)
        await session.commit()
        logger.info("appointment_deleted", user_id=user_id, appointment_id=str(appointment_id))
