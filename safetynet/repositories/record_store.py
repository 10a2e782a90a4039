# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Record store — residents, station assignments and medical profiles.
Writers serialize on one lock and publish a new frozen snapshot; readers take
the current snapshot reference without locking and never see a half-applied
write. NO query logic here — CRUD plus the one-station-per-address rule.
"""

import threading
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, TypeVar

from safetynet.core.errors import ConflictError
from safetynet.models.domain import MedicalProfile, Record, Resident, StationAssignment

R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the three collections at one store version."""
    version: int = 0
    residents: tuple[Resident, ...] = ()
    stations: tuple[StationAssignment, ...] = ()
    profiles: tuple[MedicalProfile, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "persons": len(self.residents),
            "firestations": len(self.stations),
            "medicalrecords": len(self.profiles),
        }


def split_duplicate_assignments(
    stations: Iterable[StationAssignment],
) -> tuple[list[StationAssignment], list[StationAssignment]]:
    """Return (kept, dropped): the first assignment per address wins."""
    kept: list[StationAssignment] = []
    dropped: list[StationAssignment] = []
    seen: set[str] = set()
    for assignment in stations:
        if assignment.address in seen:
            dropped.append(assignment)
        else:
            seen.add(assignment.address)
            kept.append(assignment)
    return kept, dropped


def _with_changes(record: R, changes: dict[str, Any]) -> R:
    # Re-validate so list inputs become tuples and strings get parsed.
    return type(record).model_validate({**record.model_dump(), **changes})


def _named(first_name: str, last_name: str):
    return lambda r: r.first_name == first_name and r.last_name == last_name


class RecordStore:
    """In-memory record storage with copy-on-write snapshots."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = Snapshot()

    # ── Read ──

    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    def count(self) -> int:
        return sum(self._snapshot.counts().values())

    def find_resident(self, first_name: str, last_name: str) -> Optional[Resident]:
        match = _named(first_name, last_name)
        return next((r for r in self._snapshot.residents if match(r)), None)

    def find_profile(self, first_name: str, last_name: str) -> Optional[MedicalProfile]:
        match = _named(first_name, last_name)
        return next((p for p in self._snapshot.profiles if match(p)), None)

    def find_station(self, address: str) -> Optional[StationAssignment]:
        return next((s for s in self._snapshot.stations if s.address == address), None)

    # ── Write: residents ──

    def add_resident(self, resident: Resident) -> Resident:
        with self._lock:
            current = self._snapshot
            if any(
                r.identity == resident.identity and r.address == resident.address
                for r in current.residents
            ):
                raise ConflictError(
                    f"A person named {resident.first_name} {resident.last_name} "
                    f"already lives at '{resident.address}'",
                    {
                        "firstName": resident.first_name,
                        "lastName": resident.last_name,
                        "address": resident.address,
                    },
                )
            self._publish(residents=current.residents + (resident,))
        return resident

    def update_resident(
        self, first_name: str, last_name: str, changes: dict[str, Any]
    ) -> Optional[Resident]:
        """Apply changes to the first resident with this name."""
        with self._lock:
            residents, updated = self._update_first(
                self._snapshot.residents, _named(first_name, last_name), changes
            )
            if updated is not None:
                self._publish(residents=residents)
        return updated

    def delete_resident(self, first_name: str, last_name: str) -> int:
        """Delete every resident with this name. Returns the count removed."""
        with self._lock:
            residents, removed = self._remove(
                self._snapshot.residents, _named(first_name, last_name)
            )
            if removed:
                self._publish(residents=residents)
        return removed

    # ── Write: station assignments ──

    def add_station(self, assignment: StationAssignment) -> StationAssignment:
        with self._lock:
            current = self._snapshot
            if any(s.address == assignment.address for s in current.stations):
                raise ConflictError(
                    f"A fire station mapping already exists for address '{assignment.address}'",
                    {"address": assignment.address},
                )
            self._publish(stations=current.stations + (assignment,))
        return assignment

    def update_station(self, address: str, station: int) -> Optional[StationAssignment]:
        """Replace the station number assigned to an address."""
        with self._lock:
            stations, updated = self._update_first(
                self._snapshot.stations,
                lambda s: s.address == address,
                {"station": station},
            )
            if updated is not None:
                self._publish(stations=stations)
        return updated

    def delete_station_by_address(self, address: str) -> int:
        with self._lock:
            stations, removed = self._remove(
                self._snapshot.stations, lambda s: s.address == address
            )
            if removed:
                self._publish(stations=stations)
        return removed

    def delete_stations_by_number(self, station: int) -> int:
        """Delete every address assigned to a station. Returns the count removed."""
        with self._lock:
            stations, removed = self._remove(
                self._snapshot.stations, lambda s: s.station == station
            )
            if removed:
                self._publish(stations=stations)
        return removed

    # ── Write: medical profiles ──

    def add_profile(self, profile: MedicalProfile) -> MedicalProfile:
        with self._lock:
            self._publish(profiles=self._snapshot.profiles + (profile,))
        return profile

    def update_profile(
        self, first_name: str, last_name: str, changes: dict[str, Any]
    ) -> Optional[MedicalProfile]:
        with self._lock:
            profiles, updated = self._update_first(
                self._snapshot.profiles, _named(first_name, last_name), changes
            )
            if updated is not None:
                self._publish(profiles=profiles)
        return updated

    def delete_profile(self, first_name: str, last_name: str) -> int:
        with self._lock:
            profiles, removed = self._remove(
                self._snapshot.profiles, _named(first_name, last_name)
            )
            if removed:
                self._publish(profiles=profiles)
        return removed

    # ── Bulk / internal ──

    def replace_all(
        self,
        residents: Iterable[Resident],
        stations: Iterable[StationAssignment],
        profiles: Iterable[MedicalProfile],
    ) -> list[StationAssignment]:
        """Swap in a whole data set. Returns the duplicate assignments dropped."""
        kept, dropped = split_duplicate_assignments(stations)
        with self._lock:
            self._publish(
                residents=tuple(residents),
                stations=tuple(kept),
                profiles=tuple(profiles),
            )
        return dropped

    def _publish(self, **collections: tuple) -> Snapshot:
        # Caller holds self._lock.
        self._snapshot = replace(
            self._snapshot, version=self._snapshot.version + 1, **collections
        )
        return self._snapshot

    @staticmethod
    def _update_first(records: tuple, match, changes: dict[str, Any]):
        for index, record in enumerate(records):
            if match(record):
                updated = _with_changes(record, changes)
                return records[:index] + (updated,) + records[index + 1:], updated
        return records, None

    @staticmethod
    def _remove(records: tuple, match) -> tuple[tuple, int]:
        kept = tuple(r for r in records if not match(r))
        return kept, len(records) - len(kept)
