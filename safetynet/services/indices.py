# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Lookup indices derived from a record store snapshot.
Pure computation, no I/O. Built once per snapshot version and shared by
every query that reads that version.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from safetynet.models.domain import IdentityKey, MedicalProfile, Resident
from safetynet.repositories.record_store import Snapshot


class MatchMode(str, Enum):
    """How a query compares names or cities against stored values."""
    EXACT = "exact"
    IGNORE_CASE = "ignore_case"

    def key(self, value: str) -> str:
        return value.lower() if self is MatchMode.IGNORE_CASE else value

    def matches(self, stored: str, requested: str) -> bool:
        return self.key(stored) == self.key(requested)


@dataclass(frozen=True)
class Indices:
    """Read-only lookup tables for one snapshot version."""
    version: int
    residents: tuple[Resident, ...]
    address_to_station: dict[str, int]
    station_to_addresses: dict[int, tuple[str, ...]]
    address_to_residents: dict[str, tuple[Resident, ...]]
    identity_to_profile: dict[IdentityKey, MedicalProfile]

    def station_exists(self, station: int) -> bool:
        return station in self.station_to_addresses

    def addresses_for(self, station: int) -> tuple[str, ...]:
        return self.station_to_addresses.get(station, ())

    def residents_at(self, address: str) -> tuple[Resident, ...]:
        return self.address_to_residents.get(address, ())

    def residents_for_station(self, station: int) -> list[Resident]:
        """Residents covered by a station, in record order."""
        addresses = set(self.addresses_for(station))
        return [r for r in self.residents if r.address in addresses]

    def station_for(self, address: str) -> Optional[int]:
        return self.address_to_station.get(address)

    def profile_for(self, resident: Resident) -> Optional[MedicalProfile]:
        return self.identity_to_profile.get(resident.identity)


def build_indices(snapshot: Snapshot) -> Indices:
    """Build every index from a snapshot. First match wins on duplicate keys."""
    address_to_station: dict[str, int] = {}
    station_to_addresses: dict[int, list[str]] = {}
    for assignment in snapshot.stations:
        if assignment.address in address_to_station:
            continue
        address_to_station[assignment.address] = assignment.station
        station_to_addresses.setdefault(assignment.station, []).append(assignment.address)

    address_to_residents: dict[str, list[Resident]] = {}
    for resident in snapshot.residents:
        address_to_residents.setdefault(resident.address, []).append(resident)

    identity_to_profile: dict[IdentityKey, MedicalProfile] = {}
    for profile in snapshot.profiles:
        identity_to_profile.setdefault(profile.identity, profile)

    return Indices(
        version=snapshot.version,
        residents=snapshot.residents,
        address_to_station=address_to_station,
        station_to_addresses={s: tuple(a) for s, a in station_to_addresses.items()},
        address_to_residents={a: tuple(r) for a, r in address_to_residents.items()},
        identity_to_profile=identity_to_profile,
    )
