# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Query resolution — joins residents, station assignments and medical
profiles into the answers served by the alert endpoints.

Every query reads one store snapshot from start to finish, so a concurrent
write never shows up half-applied. The resolver holds no records of its own;
it only caches the lookup indices of the latest snapshot version.
"""

from datetime import date
from typing import Iterable, Optional

from safetynet.core.config import settings
from safetynet.core.errors import NotFoundError
from safetynet.core.logging import get_logger
from safetynet.metrics.prometheus import (
    INDEX_REBUILDS,
    RESIDENTS_SKIPPED,
    RESOLVER_ERRORS,
    RESOLVER_QUERIES,
)
from safetynet.models.domain import MedicalProfile, Resident
from safetynet.models.views import (
    UNKNOWN_STATION,
    AddressGroup,
    ChildAlert,
    ChildRecord,
    CommunityEmail,
    CoveredResident,
    CoverageSummary,
    FireAlert,
    FloodAlert,
    HouseholdMember,
    PersonInfo,
    PhoneAlert,
    ResidentWithMedicalInfo,
)
from safetynet.repositories.record_store import RecordStore, Snapshot
from safetynet.services.age import Clock, calculate_age, is_child
from safetynet.services.indices import Indices, MatchMode, build_indices

logger = get_logger(__name__)

COVERAGE_BY_STATION = "coverage_by_station"
CHILDREN_AT_ADDRESS = "children_at_address"
PHONE_NUMBERS_BY_STATION = "phone_numbers_by_station"
RESIDENTS_AND_STATION_BY_ADDRESS = "residents_and_station_by_address"
EMAILS_BY_CITY = "emails_by_city"
HOUSEHOLDS_BY_STATIONS = "households_by_stations"
PERSON_INFO = "person_info"
PERSONS_BY_LAST_NAME = "persons_by_last_name"

OPERATIONS: tuple[str, ...] = (
    COVERAGE_BY_STATION,
    CHILDREN_AT_ADDRESS,
    PHONE_NUMBERS_BY_STATION,
    RESIDENTS_AND_STATION_BY_ADDRESS,
    EMAILS_BY_CITY,
    HOUSEHOLDS_BY_STATIONS,
    PERSON_INFO,
    PERSONS_BY_LAST_NAME,
)


class Resolver:
    """Read-only queries over the record store."""

    # Person lookups by name ignore case; every other name join is exact.
    NAME_MATCH: dict[str, MatchMode] = {
        PERSON_INFO: MatchMode.IGNORE_CASE,
        PERSONS_BY_LAST_NAME: MatchMode.IGNORE_CASE,
    }
    CITY_MATCH: MatchMode = MatchMode.IGNORE_CASE

    def __init__(
        self,
        store: RecordStore,
        today: Clock = date.today,
        child_age_limit: int = settings.CHILD_AGE_LIMIT,
        skip_missing_profiles: Iterable[str] = settings.MISSING_PROFILE_SKIP_OPERATIONS,
    ) -> None:
        self._store = store
        self._today = today
        self._child_age_limit = child_age_limit
        self._skip_missing = frozenset(skip_missing_profiles)
        unknown = self._skip_missing - set(OPERATIONS)
        if unknown:
            raise ValueError(f"Unknown resolver operations: {sorted(unknown)}")
        self._indices: Optional[Indices] = None

    # ── Station queries ──

    def coverage_by_station(
        self, station: int, today: Optional[date] = None
    ) -> CoverageSummary:
        """Residents covered by a station, with adult and child counts."""
        _, indices = self._read(COVERAGE_BY_STATION)
        if not indices.station_exists(station):
            raise self._not_found(COVERAGE_BY_STATION, NotFoundError.stations([station]))

        reference = self._reference_date(today)
        persons: list[CoveredResident] = []
        for resident in indices.residents_for_station(station):
            profile = self._profile_for(COVERAGE_BY_STATION, indices, resident)
            if profile is None:
                continue
            persons.append(CoveredResident(
                first_name=resident.first_name,
                last_name=resident.last_name,
                address=resident.address,
                phone=resident.phone,
                age=calculate_age(profile.birthdate, reference),
            ))

        child_count = sum(1 for p in persons if is_child(p.age, self._child_age_limit))
        logger.debug(
            "Coverage for station %d: persons=%d, children=%d",
            station, len(persons), child_count,
        )
        return CoverageSummary(
            persons=persons,
            adult_count=len(persons) - child_count,
            child_count=child_count,
        )

    def phone_numbers_by_station(self, station: int) -> PhoneAlert:
        """Distinct phone numbers of the residents a station covers."""
        _, indices = self._read(PHONE_NUMBERS_BY_STATION)
        phones = [r.phone for r in indices.residents_for_station(station)]
        return PhoneAlert(phone_numbers=list(dict.fromkeys(phones)))

    def households_by_stations(
        self, stations: Iterable[int], today: Optional[date] = None
    ) -> FloodAlert:
        """Households covered by several stations, grouped by address."""
        _, indices = self._read(HOUSEHOLDS_BY_STATIONS)
        requested = list(dict.fromkeys(stations))
        unknown = [s for s in requested if not indices.station_exists(s)]
        if unknown:
            raise self._not_found(HOUSEHOLDS_BY_STATIONS, NotFoundError.stations(unknown))

        reference = self._reference_date(today)
        groups: list[AddressGroup] = []
        for station in requested:
            for address in indices.addresses_for(station):
                residents = self._medical_infos(
                    HOUSEHOLDS_BY_STATIONS, indices, indices.residents_at(address), reference
                )
                if residents:
                    groups.append(AddressGroup(address=address, residents=residents))
        logger.debug("Flood households for stations %s: %d addresses", requested, len(groups))
        return FloodAlert(addresses=groups)

    # ── Address queries ──

    def children_at_address(
        self, address: str, today: Optional[date] = None
    ) -> ChildAlert:
        """Children living at an address, plus the other household members."""
        _, indices = self._read(CHILDREN_AT_ADDRESS)
        reference = self._reference_date(today)
        children: list[ChildRecord] = []
        members: list[HouseholdMember] = []
        for resident in indices.residents_at(address):
            profile = self._profile_for(CHILDREN_AT_ADDRESS, indices, resident)
            if profile is None:
                continue
            age = calculate_age(profile.birthdate, reference)
            if is_child(age, self._child_age_limit):
                children.append(ChildRecord(
                    first_name=resident.first_name,
                    last_name=resident.last_name,
                    age=age,
                ))
            else:
                members.append(HouseholdMember(
                    first_name=resident.first_name,
                    last_name=resident.last_name,
                ))
        logger.debug(
            "Child alert for %s: children=%d, household members=%d",
            address, len(children), len(members),
        )
        return ChildAlert(children=children, household_members=members)

    def residents_and_station_by_address(
        self, address: str, today: Optional[date] = None
    ) -> FireAlert:
        """Residents of an address with medical details and the covering station."""
        _, indices = self._read(RESIDENTS_AND_STATION_BY_ADDRESS)
        residents = self._medical_infos(
            RESIDENTS_AND_STATION_BY_ADDRESS,
            indices,
            indices.residents_at(address),
            self._reference_date(today),
        )
        station = indices.station_for(address)
        if station is None:
            logger.warning("No fire station mapped for address %s", address)
        return FireAlert(
            residents=residents,
            fire_station_number=UNKNOWN_STATION if station is None else str(station),
        )

    # ── City queries ──

    def emails_by_city(self, city: str) -> CommunityEmail:
        """Distinct emails of the residents of a city. City match ignores case."""
        snapshot, _ = self._read(EMAILS_BY_CITY)
        emails = [r.email for r in snapshot.residents if self.CITY_MATCH.matches(r.city, city)]
        return CommunityEmail(emails=list(dict.fromkeys(emails)))

    # ── Person queries ──

    def person_info(
        self, first_name: str, last_name: str, today: Optional[date] = None
    ) -> Optional[PersonInfo]:
        """Contact and medical details of the first resident with this name, or None."""
        snapshot, indices = self._read(PERSON_INFO)
        mode = self.NAME_MATCH.get(PERSON_INFO, MatchMode.EXACT)
        resident = next(
            (
                r for r in snapshot.residents
                if mode.matches(r.first_name, first_name) and mode.matches(r.last_name, last_name)
            ),
            None,
        )
        if resident is None:
            logger.info("No person found named %s %s", first_name, last_name)
            return None
        profile = self._profile_for(PERSON_INFO, indices, resident)
        if profile is None:
            return None
        return self._person_info(resident, profile, self._reference_date(today))

    def persons_by_last_name(
        self, last_name: str, today: Optional[date] = None
    ) -> list[PersonInfo]:
        """Contact and medical details of every resident with this last name."""
        snapshot, indices = self._read(PERSONS_BY_LAST_NAME)
        mode = self.NAME_MATCH.get(PERSONS_BY_LAST_NAME, MatchMode.EXACT)
        reference = self._reference_date(today)
        result: list[PersonInfo] = []
        for resident in snapshot.residents:
            if not mode.matches(resident.last_name, last_name):
                continue
            profile = self._profile_for(PERSONS_BY_LAST_NAME, indices, resident)
            if profile is not None:
                result.append(self._person_info(resident, profile, reference))
        return result

    # ── Internal ──

    def _read(self, operation: str) -> tuple[Snapshot, Indices]:
        RESOLVER_QUERIES.labels(operation=operation).inc()
        snapshot = self._store.snapshot()
        indices = self._indices
        if indices is None or indices.version != snapshot.version:
            indices = build_indices(snapshot)
            self._indices = indices
            INDEX_REBUILDS.inc()
        return snapshot, indices

    def _reference_date(self, today: Optional[date]) -> date:
        return today if today is not None else self._today()

    def _not_found(self, operation: str, error: NotFoundError) -> NotFoundError:
        RESOLVER_ERRORS.labels(operation=operation).inc()
        logger.warning("%s: %s", operation, error.message, extra={"operation": operation})
        return error

    def _profile_for(
        self, operation: str, indices: Indices, resident: Resident
    ) -> Optional[MedicalProfile]:
        """Medical profile of a resident, applying the operation's missing-profile policy."""
        profile = indices.profile_for(resident)
        if profile is not None:
            return profile
        if operation in self._skip_missing:
            RESIDENTS_SKIPPED.labels(operation=operation).inc()
            logger.warning(
                "%s: skipping %s %s, no medical record",
                operation, resident.first_name, resident.last_name,
                extra={"operation": operation},
            )
            return None
        raise self._not_found(
            operation, NotFoundError.medical_profile(resident.first_name, resident.last_name)
        )

    def _medical_infos(
        self,
        operation: str,
        indices: Indices,
        residents: Iterable[Resident],
        reference: date,
    ) -> list[ResidentWithMedicalInfo]:
        infos: list[ResidentWithMedicalInfo] = []
        for resident in residents:
            profile = self._profile_for(operation, indices, resident)
            if profile is None:
                continue
            infos.append(ResidentWithMedicalInfo(
                first_name=resident.first_name,
                last_name=resident.last_name,
                phone=resident.phone,
                age=calculate_age(profile.birthdate, reference),
                medications=list(profile.medications),
                allergies=list(profile.allergies),
            ))
        return infos

    @staticmethod
    def _person_info(resident: Resident, profile: MedicalProfile, reference: date) -> PersonInfo:
        return PersonInfo(
            first_name=resident.first_name,
            last_name=resident.last_name,
            address=resident.address,
            age=calculate_age(profile.birthdate, reference),
            email=resident.email,
            medications=list(profile.medications),
            allergies=list(profile.allergies),
        )
