# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Person management — business logic for resident CRUD.
"""

from typing import Any

from safetynet.core.errors import NotFoundError
from safetynet.core.logging import get_logger
from safetynet.models.domain import Resident
from safetynet.services.record_service import RecordService

logger = get_logger(__name__)


class PersonService(RecordService):
    """Business logic for resident records."""

    entity = "person"

    # ── Commands ──

    def add_person(self, person: Resident) -> Resident:
        """Add a resident. Raises ConflictError on an exact duplicate."""
        created = self._store.add_resident(person)
        self._committed("create")
        logger.info(
            "Person added: %s %s, address=%s",
            person.first_name, person.last_name, person.address,
        )
        return created

    def update_person(
        self, first_name: str, last_name: str, changes: dict[str, Any]
    ) -> Resident:
        """Update contact details of a resident. Raises NotFoundError."""
        updated = self._store.update_resident(first_name, last_name, changes)
        if updated is None:
            logger.warning("Update of unknown person: %s %s", first_name, last_name)
            raise NotFoundError.person(first_name, last_name)
        self._committed("update")
        logger.info("Person updated: %s %s, fields=%s", first_name, last_name, sorted(changes))
        return updated

    def delete_person(self, first_name: str, last_name: str) -> int:
        """Delete every resident with this name. Raises NotFoundError."""
        removed = self._store.delete_resident(first_name, last_name)
        if removed == 0:
            logger.warning("Delete of unknown person: %s %s", first_name, last_name)
            raise NotFoundError.person(first_name, last_name)
        self._committed("delete")
        logger.info("Person deleted: %s %s, count=%d", first_name, last_name, removed)
        return removed

    # ── Queries ──

    def get_person(self, first_name: str, last_name: str) -> Resident:
        person = self._store.find_resident(first_name, last_name)
        if person is None:
            raise NotFoundError.person(first_name, last_name)
        return person

    def list_persons(self) -> list[Resident]:
        return list(self._store.snapshot().residents)
