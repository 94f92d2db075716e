from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Any, List, Optional
import logging

from ..models.appointment import Appointment
from ..core.database import MAX_ID
from ..core.errors import InvalidRequest, ResourceNotFound, SlotConflict
from ..core.validators import validate_request
from ..schemas.appointment import AppointmentCreate, AppointmentUpdate
from .patient_service import PatientService

logger = logging.getLogger(__name__)

class AppointmentService:
    """Create, update and delete appointments while keeping each patient's
    slots exclusive.

    A slot is the (appointment_date, appointment_time) pair of one patient.
    Checks run syntax first, then the patient reference, then the slot, so
    a malformed request is never reported as a missing patient or a
    conflict.
    """

    def __init__(self, db: Session):
        self.db = db
        self.patients = PatientService(db)

    def list_appointments(self) -> List[Appointment]:
        """Return every appointment ordered by patient."""
        return self.db.query(Appointment).order_by(
            Appointment.patient_id, Appointment.id
        ).all()

    def get_appointment(self, appointment_id: int) -> Appointment:
        """Return an appointment or raise ResourceNotFound."""
        if appointment_id > MAX_ID:
            raise ResourceNotFound("Appointment not found")
        appointment =self.db.query(Appointment).filter(
            Appointment.id == appointment_id
        ).first()
        if not appointment:
            raise ResourceNotFound("Appointment not found")
        return appointment

    def slot_taken(
        self,
        patient_id: int,
        appointment_date: str,
        appointment_time: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """Check whether the patient already has an appointment in this slot.

        ``exclude_id`` leaves one appointment out of the check, so an
        appointment never conflicts with itself.
        """
        query = self.db.query(Appointment.id).filter(
            Appointment.patient_id == patient_id,
            Appointment.appointment_date == appointment_date,
            Appointment.appointment_time == appointment_time
        )
        if exclude_id is not None:
            query = query.filter(Appointment.id != exclude_id)
        return query.first() is not None

    def create_appointment(self, payload: Any) -> Appointment:
        """Book a new appointment from a request body."""
        outcome = validate_request(AppointmentCreate, payload)
        if not outcome.ok:
            raise InvalidRequest(outcome.message, field=outcome.field)
        data = outcome.value

        if not self.patients.patient_exists(data.patient_id):
            raise ResourceNotFound("Patient not found")

        if self.slot_taken(data.patient_id, data.appointment_date, data.appointment_time):
            logger.info(
                f"Slot {data.appointment_date} {data.appointment_time} "
                f"already booked for patient {data.patient_id}"
            )
            raise SlotConflict()

        appointment = Appointment(**data.model_dump())
        self.db.add(appointment)
        self._commit_slot(data.patient_id, data.appointment_date, data.appointment_time)
        self.db.refresh(appointment)

        logger.info(f"Appointment {appointment.id} created for patient {appointment.patient_id}")
        return appointment

    def update_appointment(self, appointment_id: int, payload: Any) -> Appointment:
        """Apply a partial update and re-check the resulting slot."""
        appointment = self.get_appointment(appointment_id)

        outcome = validate_request(AppointmentUpdate, payload)
        if not outcome.ok:
            raise InvalidRequest(outcome.message, field=outcome.field)
        changes = outcome.value

        patient_id = appointment.patient_id
        new_date = changes.appointment_date or appointment.appointment_date
        new_time = changes.appointment_time or appointment.appointment_time
        new_reason = changes.reason or appointment.reason

        if (new_date, new_time) != appointment.slot and self.slot_taken(
            patient_id, new_date, new_time, exclude_id=appointment_id
        ):
            logger.info(
                f"Cannot move appointment {appointment_id}: slot {new_date} {new_time} "
                f"already booked for patient {patient_id}"
            )
            raise SlotConflict()

        appointment.appointment_date = new_date
        appointment.appointment_time = new_time
        appointment.reason = new_reason
        self._commit_slot(patient_id, new_date, new_time, exclude_id=appointment_id)
        self.db.refresh(appointment)

        logger.info(f"Appointment {appointment_id} updated")
        return appointment

    def delete_appointment(self, appointment_id: int) -> None:
        """Remove an appointment."""
        appointment = self.get_appointment(appointment_id)
        self.db.delete(appointment)
        self.db.commit()
        logger.info(f"Appointment {appointment_id} deleted")

    def _commit_slot(
        self,
        patient_id: int,
        appointment_date: str,
        appointment_time: str,
        exclude_id: Optional[int] = None
    ):
        """Commit a slot write.

        The slot check above and this commit are not atomic; a concurrent
        booking of the same slot is stopped by the unique constraint and
        reported as a conflict.
        """
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.slot_taken(patient_id, appointment_date, appointment_time, exclude_id=exclude_id):
                logger.warning(
                    f"Concurrent booking of {appointment_date} {appointment_time} "
                    f"for patient {patient_id} rejected by the database"
                )
                raise SlotConflict()
            raise
