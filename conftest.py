"""Root conftest — shared test configuration and record fixtures."""

import os
import tempfile
from datetime import date

# Tests never read or write the bundled data file.
os.environ.setdefault(
    "DATA_FILE_PATH", os.path.join(tempfile.gettempdir(), "safetynet-test", "missing.json")
)
os.environ.setdefault("PERSIST_ON_MUTATION", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from safetynet.models.domain import MedicalProfile, Resident, StationAssignment  # noqa: E402
from safetynet.repositories.record_store import RecordStore  # noqa: E402

TODAY = date(2024, 6, 1)


def resident(first, last, address, city="Culver", phone="841-874-6512", email=None):
    return Resident(
        first_name=first,
        last_name=last,
        address=address,
        city=city,
        zip="97451",
        phone=phone,
        email=email or f"{first.lower()}@email.com",
    )


def profile(first, last, birthdate, medications=(), allergies=()):
    return MedicalProfile(
        first_name=first,
        last_name=last,
        birthdate=birthdate,
        medications=medications,
        allergies=allergies,
    )


def station(address, number):
    return StationAssignment(address=address, station=number)


SAMPLE_RESIDENTS = [
    resident("John", "Boyd", "1509 Culver St", phone="841-874-6512", email="jaboyd@email.com"),
    resident("Tenley", "Boyd", "1509 Culver St", phone="841-874-6512", email="tenz@email.com"),
    resident("Roger", "Boyd", "1509 Culver St", phone="841-874-6512", email="jaboyd@email.com"),
    resident("Peter", "Duncan", "644 Gershwin Cir", phone="841-874-6544", email="pduncan@email.com"),
    resident("Eric", "Cadigan", "951 LoneTree Rd", phone="841-874-7458", email="gramps@email.com"),
    resident("Lily", "Cooper", "489 Manchester St", city="Springfield",
             phone="841-874-9845", email="lily@email.com"),
]

SAMPLE_STATIONS = [
    station("1509 Culver St", 3),
    station("644 Gershwin Cir", 1),
    station("951 LoneTree Rd", 2),
    station("29 15th St", 2),
    station("489 Manchester St", 4),
]

SAMPLE_PROFILES = [
    profile("John", "Boyd", "03/06/1984", ["aznol:350mg", "hydrapermazol:100mg"], ["nillacilan"]),
    profile("Tenley", "Boyd", "02/18/2012", [], ["peanut"]),
    profile("Roger", "Boyd", "09/06/2017"),
    profile("Peter", "Duncan", "09/06/2000", [], ["shellfish"]),
    profile("Eric", "Cadigan", "08/06/1945", ["tradoxidine:400mg"]),
    profile("Lily", "Cooper", "03/06/1994"),
]


@pytest.fixture
def store():
    """A record store loaded with the sample records."""
    record_store = RecordStore()
    record_store.replace_all(SAMPLE_RESIDENTS, SAMPLE_STATIONS, SAMPLE_PROFILES)
    return record_store
