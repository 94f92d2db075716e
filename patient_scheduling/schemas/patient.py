from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from ..core.validators import field_error

# Matches the String(255) patient columns
MAX_TEXT_LENGTH = 255

class PatientCreate(BaseModel):
    name: str = Field(default=None, validate_default=True)
    contact: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise field_error("name", "Invalid name")
        if len(value.strip()) > MAX_TEXT_LENGTH:
            raise field_error("name", "name must be at most 255 characters")
        return value.strip()

    @field_validator("contact", mode="before")
    @classmethod
    def check_contact(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise field_error("contact", "Invalid contact")
        if len(value.strip()) > MAX_TEXT_LENGTH:
            raise field_error("contact", "contact must be at most 255 characters")
        return value.strip() or None

class PatientUpdate(PatientCreate):
    """Full replacement of a patient's name and contact."""

class PatientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    contact: Optional[str] = None

class PatientMutationResponse(PatientResponse):
    message: str

    @classmethod
    def from_record(cls, patient, message: str) -> "PatientMutationResponse":
        return cls(**PatientResponse.model_validate(patient).model_dump(), message=message)

class DeletionResponse(BaseModel):
    id: int
    message: str
