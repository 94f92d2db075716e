from sqlalchemy.orm import Session
from typing import Any, List, Optional
import logging

from ..models.patient import Patient
from ..models.appointment import Appointment
from ..core.database import MAX_ID
from ..core.errors import InvalidRequest, ResourceConflict, ResourceNotFound
from ..core.validators import validate_request
from ..schemas.patient import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)

DEFAULT_PATIENT_NAME = "John Doe"
DEFAULT_PATIENT_CONTACT = "123456789"

class PatientService:
    def __init__(self, db: Session):
        self.db = db

    def list_patients(self) -> List[Patient]:
        """Return every patient ordered by id."""
        return self.db.query(Patient).order_by(Patient.id).all()

    def get_patient(self, patient_id: int) -> Patient:
        """Return a patient or raise ResourceNotFound."""
        if patient_id > MAX_ID:
            raise ResourceNotFound("Patient not found")
        patient = self.db.query(Patient).filter(Patient.id == patient_id).first()
        if not patient:
            raise ResourceNotFound("Patient not found")
        return patient

    def patient_exists(self, patient_id: int) -> bool:
        """Check whether a patient with this id is stored.

        An empty result is a plain ``False``; storage failures are not
        caught here and reach the caller as SQLAlchemy errors.
        """
        if patient_id > MAX_ID:
            return False
        return self.db.query(Patient.id).filter(Patient.id == patient_id).first() is not None

    def create_patient(self, payload: Any) -> Patient:
        """Create a patient from a request body."""
        outcome = validate_request(PatientCreate, payload)
        if not outcome.ok:
            raise InvalidRequest(outcome.message, field=outcome.field)
        data = outcome.value

        patient = Patient(name=data.name, contact=data.contact)
        self.db.add(patient)
        self.db.commit()
        self.db.refresh(patient)

        logger.info(f"Patient {patient.id} created")
        return patient

    def update_patient(self, patient_id: int, payload: Any) -> Patient:
        """Replace a patient's name and contact."""
        patient = self.get_patient(patient_id)

        outcome = validate_request(PatientUpdate, payload)
        if not outcome.ok:
            raise InvalidRequest(outcome.message, field=outcome.field)
        data = outcome.value

        patient.name = data.name
        patient.contact = data.contact
        self.db.commit()
        self.db.refresh(patient)

        logger.info(f"Patient {patient.id} updated")
        return patient

    def delete_patient(self, patient_id: int) -> None:
        """Delete a patient that no appointment refers to."""
        patient = self.get_patient(patient_id)

        has_appointments = self.db.query(Appointment.id).filter(
            Appointment.patient_id == patient_id
        ).first()
        if has_appointments:
            raise ResourceConflict("Patient has scheduled appointments")

        self.db.delete(patient)
        self.db.commit()
        logger.info(f"Patient {patient_id} deleted")

    def seed_default_patient(self) -> Optional[Patient]:
        """Insert the default patient when the table is empty."""
        if self.db.query(Patient.id).first() is not None:
            return None

        patient = Patient(name=DEFAULT_PATIENT_NAME, contact=DEFAULT_PATIENT_CONTACT)
        self.db.add(patient)
        self.db.commit()
        self.db.refresh(patient)

        logger.info(f"Seed patient {patient.id} added")
        return patient
