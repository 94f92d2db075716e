from fastapi import APIRouter, Body, Depends, Path, status
from sqlalchemy.orm import Session
from typing import Any, List

from ..deps import get_db
from ...services.patient_service import PatientService
from ...schemas.patient import (
    PatientResponse, PatientMutationResponse, DeletionResponse
)

router = APIRouter(prefix="/patients", tags=["Patients"])

PATIENT_EXAMPLE = {"name": "Jane Doe", "contact": "+1234567890"}

@router.get("", response_model=List[PatientResponse])
def list_patients(db: Session = Depends(get_db)):
    """List all patients."""
    return PatientService(db).list_patients()

@router.post("", response_model=PatientMutationResponse, status_code=status.HTTP_201_CREATED)
def create_patient(
    payload: Any = Body(None, examples=[PATIENT_EXAMPLE]),
    db: Session = Depends(get_db)
):
    """Create a new patient."""
    patient = PatientService(db).create_patient(payload)
    return PatientMutationResponse.from_record(patient, "Patient created successfully")

@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(
    patient_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Get a patient by id."""
    return PatientService(db).get_patient(patient_id)

@router.put("/{patient_id}", response_model=PatientMutationResponse)
def update_patient(
    patient_id: int = Path(..., gt=0),
    payload: Any = Body(None, examples=[PATIENT_EXAMPLE]),
    db: Session = Depends(get_db)
):
    """Replace a patient's name and contact."""
    patient = PatientService(db).update_patient(patient_id, payload)
    return PatientMutationResponse.from_record(patient, "Patient updated successfully")

@router.delete("/{patient_id}", response_model=DeletionResponse)
def delete_patient(
    patient_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Delete a patient without appointments."""
    PatientService(db).delete_patient(patient_id)
    return DeletionResponse(id=patient_id, message="Patient deleted successfully")
