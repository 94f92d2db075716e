from fastapi import APIRouter, Body, Depends, Path, status
from sqlalchemy.orm import Session
from typing import Any, List

from ..deps import get_db
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import AppointmentResponse, AppointmentMutationResponse
from ...schemas.patient import DeletionResponse

router = APIRouter(prefix="/appointments", tags=["Appointments"])

CREATE_EXAMPLE = {
    "patient_id": 1,
    "appointment_date": "2025-08-20",
    "appointment_time": "14:30",
    "reason": "Routine check-up"
}
UPDATE_EXAMPLE = {"appointment_time": "15:00"}

@router.get("", response_model=List[AppointmentResponse])
def list_appointments(db: Session = Depends(get_db)):
    """List all appointments."""
    return AppointmentService(db).list_appointments()

@router.post("", response_model=AppointmentMutationResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    payload: Any = Body(None, examples=[CREATE_EXAMPLE]),
    db: Session = Depends(get_db)
):
    """Book an appointment.

    Returns 400 for a malformed field, 404 when the patient does not exist
    and 409 when the patient already has an appointment in that slot.
    """
    appointment = AppointmentService(db).create_appointment(payload)
    return AppointmentMutationResponse.from_record(appointment, "Appointment created successfully")

@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(
    appointment_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Get an appointment by id."""
    return AppointmentService(db).get_appointment(appointment_id)

@router.put("/{appointment_id}", response_model=AppointmentMutationResponse)
@router.patch("/{appointment_id}", response_model=AppointmentMutationResponse)
def update_appointment(
    appointment_id: int = Path(..., gt=0),
    payload: Any = Body(None, examples=[UPDATE_EXAMPLE]),
    db: Session = Depends(get_db)
):
    """Change the date, time or reason of an appointment.

    Fields left out keep their current value.
    """
    appointment = AppointmentService(db).update_appointment(appointment_id, payload)
    return AppointmentMutationResponse.from_record(appointment, "Appointment updated successfully")

@router.delete("/{appointment_id}", response_model=DeletionResponse)
def delete_appointment(
    appointment_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Cancel an appointment."""
    AppointmentService(db).delete_appointment(appointment_id)
    return DeletionResponse(id=appointment_id, message="Appointment deleted successfully")
