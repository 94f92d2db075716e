from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base

class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = (
        # One appointment per patient per slot, enforced by the database too
        UniqueConstraint(
            "patient_id", "appointment_date", "appointment_time",
            name="uq_appointments_patient_slot"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)

    # Slot, kept exactly as submitted: "YYYY-MM-DD" and "HH:MM"
    appointment_date = Column(String(10), nullable=False)
    appointment_time = Column(String(5), nullable=False)
    reason = Column(Text, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    patient = relationship("Patient", back_populates="appointments")

    @property
    def slot(self):
        return (self.appointment_date, self.appointment_time)

    def __repr__(self):
        return f"<Appointment(id={self.id}, patient_id={self.patient_id}, slot='{self.appointment_date} {self.appointment_time}')>"
