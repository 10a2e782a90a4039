# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Fire station mapping management — business logic for
address-to-station assignments.
"""

from safetynet.core.errors import NotFoundError
from safetynet.core.logging import get_logger
from safetynet.models.domain import StationAssignment
from safetynet.services.record_service import RecordService

logger = get_logger(__name__)


class FireStationService(RecordService):
    """Business logic for station assignments."""

    entity = "firestation"

    # ── Commands ──

    def add_mapping(self, address: str, station: int) -> StationAssignment:
        """Assign an address to a station. Raises ConflictError if already mapped."""
        created = self._store.add_station(StationAssignment(address=address, station=station))
        self._committed("create")
        logger.info("Fire station mapping created: address=%s, station=%d", address, station)
        return created

    def update_mapping(self, address: str, station: int) -> StationAssignment:
        """Move an address to another station. Raises NotFoundError."""
        updated = self._store.update_station(address, station)
        if updated is None:
            logger.warning("Update of unmapped address: %s", address)
            raise NotFoundError.address(address)
        self._committed("update")
        logger.info("Fire station mapping updated: address=%s, station=%d", address, station)
        return updated

    def delete_by_address(self, address: str) -> int:
        removed = self._store.delete_station_by_address(address)
        if removed == 0:
            logger.warning("Delete of unmapped address: %s", address)
            raise NotFoundError.address(address)
        self._committed("delete")
        logger.info("Fire station mapping deleted: address=%s", address)
        return removed

    def delete_by_station(self, station: int) -> int:
        """Delete every mapping of a station. Returns the count removed."""
        removed = self._store.delete_stations_by_number(station)
        if removed == 0:
            logger.warning("Delete of unknown station: %d", station)
            raise NotFoundError(
                f"No fire station mapping found for station {station}",
                {"station": str(station)},
            )
        self._committed("delete")
        logger.info("Fire station mappings deleted: station=%d, count=%d", station, removed)
        return removed

    # ── Queries ──

    def get_mapping(self, address: str) -> StationAssignment:
        assignment = self._store.find_station(address)
        if assignment is None:
            raise NotFoundError.address(address)
        return assignment

    def list_mappings(self) -> list[StationAssignment]:
        return list(self._store.snapshot().stations)
