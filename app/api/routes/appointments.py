"""Appointment endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.appointments import AppointmentCreate, AppointmentResponse
from app.services.appointment_service import AppointmentService

router = APIRouter()


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(user: UserSession = Depends(require_auth)):
    """Appointments ordered by date, then time."""
    async with get_session_factory()() as session:
        appointments = await AppointmentService().list_appointments(session, user.user_id)
        return [AppointmentResponse.model_validate(a) for a in appointments]


@router.post("", response_model=AppointmentResponse, status_code=201)
async def add_appointment(
    body: AppointmentCreate,
    user: UserSession = Depends(require_auth),
) -> AppointmentResponse:
    """Schedule a visit. Past dates are rejected with 400."""
    async with get_session_factory()() as session:
        appointment = await AppointmentService().add_appointment(session, user.user_id, body)
        return AppointmentResponse.model_validate(appointment)


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(appointment_id: UUID, user: UserSession = Depends(require_auth)) -> None:
    async with get_session_factory()() as session:
        await AppointmentService().delete_appointment(session, user.user_id, appointment_id)
