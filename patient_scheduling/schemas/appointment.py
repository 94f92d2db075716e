from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from ..core.validators import field_error, validate_date, validate_time

DATE_FORMAT_MESSAGE = "appointment_date must be 'YYYY-MM-DD'"
TIME_FORMAT_MESSAGE = "appointment_time must be 'HH:MM' (24h)"

# Accepted spellings for each request field
PATIENT_ID_ALIASES = AliasChoices("patient_id", "patientId", "PatientId")
DATE_ALIASES = AliasChoices("appointment_date", "date", "AppointmentDate")
TIME_ALIASES = AliasChoices("appointment_time", "time", "AppointmentTime")
REASON_ALIASES = AliasChoices("reason", "Reason")

class AppointmentCreate(BaseModel):
    """New appointment request.

    Fields are declared in the order they are checked: patient reference,
    date, time, reason. Missing fields are run through the same validators
    so each one fails with its own message.
    """

    patient_id: int = Field(default=None, validate_default=True, validation_alias=PATIENT_ID_ALIASES)
    appointment_date: str = Field(default=None, validate_default=True, validation_alias=DATE_ALIASES)
    appointment_time: str = Field(default=None, validate_default=True, validation_alias=TIME_ALIASES)
    reason: str = Field(default=None, validate_default=True, validation_alias=REASON_ALIASES)

    @field_validator("patient_id", mode="before")
    @classmethod
    def check_patient_id(cls, value):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise field_error("patient_id", "Invalid patient_id")
        return value

    @field_validator("appointment_date", mode="before")
    @classmethod
    def check_date(cls, value):
        if not validate_date(value):
            raise field_error("appointment_date", DATE_FORMAT_MESSAGE)
        return value

    @field_validator("appointment_time", mode="before")
    @classmethod
    def check_time(cls, value):
        if not validate_time(value):
            raise field_error("appointment_time", TIME_FORMAT_MESSAGE)
        return value

    @field_validator("reason", mode="before")
    @classmethod
    def check_reason(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise field_error("reason", "reason is required")
        return value.strip()

class AppointmentUpdate(BaseModel):
    """Partial update; ``None`` means "keep the current value"."""

    appointment_date: Optional[str] = Field(default=None, validation_alias=DATE_ALIASES)
    appointment_time: Optional[str] = Field(default=None, validation_alias=TIME_ALIASES)
    reason: Optional[str] = Field(default=None, validation_alias=REASON_ALIASES)

    @field_validator("appointment_date", mode="before")
    @classmethod
    def check_date(cls, value):
        if value is None or value == "":
            return None
        if not validate_date(value):
            raise field_error("appointment_date", DATE_FORMAT_MESSAGE)
        return value

    @field_validator("appointment_time", mode="before")
    @classmethod
    def check_time(cls, value):
        if value is None or value == "":
            return None
        if not validate_time(value):
            raise field_error("appointment_time", TIME_FORMAT_MESSAGE)
        return value

    @field_validator("reason", mode="before")
    @classmethod
    def normalize_reason(cls, value):
        # A blank or non-text reason falls back to the stored one
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    appointment_date: str
    appointment_time: str
    reason: str
    created_at: Optional[datetime] = None

class AppointmentMutationResponse(AppointmentResponse):
    message: str

    @classmethod
    def from_record(cls, appointment, message: str) -> "AppointmentMutationResponse":
        return cls(**AppointmentResponse.model_validate(appointment).model_dump(), message=message)
