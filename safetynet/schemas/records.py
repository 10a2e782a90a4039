# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary; the
record store and resolver assume input already passed through them.
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from safetynet.core.errors import ValidationError
from safetynet.models.domain import MedicalProfile, Resident, parse_birthdate

ZIP_PATTERN = r"^[0-9]{5}$"
PHONE_PATTERN = r"^[0-9]{3}-[0-9]{3}-[0-9]{4}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
BIRTHDATE_PATTERN = r"^\d{2}/\d{2}/\d{4}$"

Medication = Annotated[str, StringConstraints(pattern=r"^[a-zA-Z0-9:\- ]+$")]
Allergy = Annotated[str, StringConstraints(pattern=r"^[a-zA-Z0-9\- ]+$")]


class RequestBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


# ── Person Schemas ──

class PersonInput(RequestBody):
    """Body of POST and PUT /person. PUT matches on firstName/lastName."""
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=255)
    zip: str = Field(..., pattern=ZIP_PATTERN, description="5-digit postal code")
    phone: str = Field(..., pattern=PHONE_PATTERN, description="NNN-NNN-NNNN")
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _not_blank(v)

    def to_resident(self) -> Resident:
        return Resident.model_validate(self.model_dump())

    def contact_changes(self) -> dict[str, str]:
        return self.model_dump(include={"address", "city", "zip", "phone", "email"})


# ── Fire Station Schemas ──

class FireStationInput(RequestBody):
    """Body of POST and PUT /firestation."""
    address: str = Field(..., min_length=1, max_length=500)
    station: int = Field(..., gt=0, le=9999, description="Fire station number")

    @field_validator("address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _not_blank(v)


# ── Medical Record Schemas ──

class MedicalRecordInput(RequestBody):
    """Body of POST and PUT /medicalRecord. PUT matches on firstName/lastName."""
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    birthdate: str = Field(..., pattern=BIRTHDATE_PATTERN, description="MM/dd/yyyy")
    medications: list[Medication] = Field(default_factory=list)
    allergies: list[Allergy] = Field(default_factory=list)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("birthdate")
    @classmethod
    def past_date(cls, v: str) -> str:
        try:
            born = parse_birthdate(v)
        except ValueError:
            raise ValueError("birthdate must be a valid MM/dd/yyyy date")
        if born >= date.today():
            raise ValueError("birthdate must be in the past")
        return v

    def to_profile(self) -> MedicalProfile:
        return MedicalProfile.model_validate(self.model_dump())

    def medical_changes(self) -> dict:
        return self.model_dump(include={"birthdate", "medications", "allergies"})


# ── Query parameters ──

def parse_station_list(raw: str) -> list[int]:
    """Parse a comma-separated list of positive station numbers."""
    try:
        stations = [int(part.strip()) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise ValidationError(
            "Invalid station format. Stations must be numbers.", {"stations": raw}
        )
    if not stations or any(s <= 0 for s in stations):
        raise ValidationError(
            "Stations must be a comma-separated list of positive numbers.",
            {"stations": raw},
        )
    return stations
