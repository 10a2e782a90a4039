# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Records are frozen so a published snapshot can be shared between concurrent
queries without copying. Field aliases follow the camelCase keys of the data
file (firstName, lastName, ...).
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

BIRTHDATE_FORMAT = "%m/%d/%Y"

IdentityKey = tuple[str, str]


def parse_birthdate(value: str) -> date:
    """Parse a MM/dd/yyyy birthdate."""
    return datetime.strptime(value.strip(), BIRTHDATE_FORMAT).date()


class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Resident(Record):
    """A person living at an address."""
    first_name: str
    last_name: str
    address: str
    city: str
    zip: str
    phone: str
    email: str

    @property
    def identity(self) -> IdentityKey:
        return (self.first_name, self.last_name)


class StationAssignment(Record):
    """Maps one street address to the fire station covering it."""
    address: str
    station: int

    @field_validator("station", mode="before")
    @classmethod
    def parse_station(cls, v: Any) -> Any:
        if isinstance(v, str):
            return int(v.strip())
        return v

    @field_serializer("station")
    def serialize_station(self, v: int) -> str:
        # The data file stores station numbers as string numerals.
        return str(v)


class MedicalProfile(Record):
    """Birthdate, medications and allergies for an identity key."""
    first_name: str
    last_name: str
    birthdate: date
    medications: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()

    @property
    def identity(self) -> IdentityKey:
        return (self.first_name, self.last_name)

    @field_validator("birthdate", mode="before")
    @classmethod
    def coerce_birthdate(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_birthdate(v)
        return v

    @field_validator("medications", "allergies", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_serializer("birthdate")
    def serialize_birthdate(self, v: date) -> str:
        return v.strftime(BIRTHDATE_FORMAT)
