from typing import List, Literal, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal
from ...api.deps import get_current_principal
from ...models.appointment import AppointmentStatus
from ...services.appointment_service import AppointmentService
from ...services.predictions import get_appointment_predictions
from ...schemas.appointment import (
    AppointmentCreate, AppointmentInsights, AppointmentOut, AppointmentSummary,
    AppointmentUpdate, PredictionOut, PredictionRequest
)
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/appointments", tags=["Appointments"], responses=ERROR_RESPONSES)

@router.post("/", response_model=Envelope[AppointmentOut], status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Book an appointment with a seed or registered doctor."""
    appointment = AppointmentService(db).create_appointment(principal, data)
    return ok(appointment, "Appointment booked successfully")

@router.get("/", response_model=Envelope[List[AppointmentOut]])
async def list_appointments(
    status: Optional[AppointmentStatus] = None,
    when: Optional[Literal["upcoming", "past"]] = None,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Appointments of the caller, ordered by date and time."""
    return ok(AppointmentService(db).list_appointments(principal, status=status, when=when))

@router.get("/summary", response_model=Envelope[AppointmentSummary])
async def appointment_summary(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    return ok(AppointmentService(db).summarize(principal))

@router.post("/predictions", response_model=Envelope[PredictionOut])
async def predict(
    request: PredictionRequest,
    _: Principal = Depends(get_current_principal)
):
    """Consultation estimate for a list of symptoms; nothing is stored."""
    symptoms = [s.model_dump() for s in request.symptoms]
    return ok(get_appointment_predictions(symptoms))

@router.get("/{appointment_id}", response_model=Envelope[AppointmentOut])
async def get_appointment(
    appointment_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    return ok(AppointmentService(db).get_appointment(principal, appointment_id))

@router.patch("/{appointment_id}", response_model=Envelope[AppointmentOut])
async def update_appointment(
    appointment_id: str,
    update: AppointmentUpdate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Send ``status`` alone to move the appointment along its lifecycle,
    or any editable fields to change its details."""
    appointment, message = AppointmentService(db).update_appointment(principal, appointment_id, update)
    return ok(appointment, message)

@router.delete("/{appointment_id}", response_model=Envelope[AppointmentOut])
async def cancel_appointment(
    appointment_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Cancel the appointment. The record is kept."""
    appointment = AppointmentService(db).cancel_appointment(principal, appointment_id)
    return ok(appointment, "Appointment cancelled successfully")

@router.get("/{appointment_id}/insights", response_model=Envelope[AppointmentInsights])
async def appointment_insights(
    appointment_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    return ok(AppointmentService(db).insights(principal, appointment_id))
