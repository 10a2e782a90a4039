# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Derived views produced by the resolver. Computed per call, never stored.
Serialized with camelCase keys (adultCount, householdMembers, ...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNKNOWN_STATION = "Unknown"


class View(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Coverage ──

class CoveredResident(View):
    first_name: str
    last_name: str
    address: str
    phone: str
    age: int


class CoverageSummary(View):
    persons: list[CoveredResident]
    adult_count: int
    child_count: int


# ── Children at an address ──

class ChildRecord(View):
    first_name: str
    last_name: str
    age: int


class HouseholdMember(View):
    first_name: str
    last_name: str


class ChildAlert(View):
    children: list[ChildRecord]
    household_members: list[HouseholdMember]


# ── Contact lists ──

class PhoneAlert(View):
    phone_numbers: list[str]


class CommunityEmail(View):
    emails: list[str]


# ── Medical views ──

class ResidentWithMedicalInfo(View):
    first_name: str
    last_name: str
    phone: str
    age: int
    medications: list[str]
    allergies: list[str]


class FireAlert(View):
    residents: list[ResidentWithMedicalInfo]
    fire_station_number: str


class AddressGroup(View):
    address: str
    residents: list[ResidentWithMedicalInfo]


class FloodAlert(View):
    addresses: list[AddressGroup]


class PersonInfo(View):
    first_name: str
    last_name: str
    address: str
    age: int
    email: str
    medications: list[str]
    allergies: list[str]
