# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Medical record management — business logic for profile CRUD.
Profiles are independent of residents: no existence check either way.
"""

from typing import Any

from safetynet.core.errors import NotFoundError
from safetynet.core.logging import get_logger
from safetynet.models.domain import MedicalProfile
from safetynet.services.record_service import RecordService

logger = get_logger(__name__)


class MedicalRecordService(RecordService):
    """Business logic for medical profiles."""

    entity = "medicalrecord"

    # ── Commands ──

    def add_record(self, profile: MedicalProfile) -> MedicalProfile:
        created = self._store.add_profile(profile)
        self._committed("create")
        logger.info("Medical record added: %s %s", profile.first_name, profile.last_name)
        return created

    def update_record(
        self, first_name: str, last_name: str, changes: dict[str, Any]
    ) -> MedicalProfile:
        """Replace birthdate, medications and allergies. Raises NotFoundError."""
        updated = self._store.update_profile(first_name, last_name, changes)
        if updated is None:
            logger.warning("Update of unknown medical record: %s %s", first_name, last_name)
            raise NotFoundError.medical_profile(first_name, last_name)
        self._committed("update")
        logger.info("Medical record updated: %s %s", first_name, last_name)
        return updated

    def delete_record(self, first_name: str, last_name: str) -> int:
        removed = self._store.delete_profile(first_name, last_name)
        if removed == 0:
            logger.warning("Delete of unknown medical record: %s %s", first_name, last_name)
            raise NotFoundError.medical_profile(first_name, last_name)
        self._committed("delete")
        logger.info("Medical record deleted: %s %s", first_name, last_name)
        return removed

    # ── Queries ──

    def get_record(self, first_name: str, last_name: str) -> MedicalProfile:
        profile = self._store.find_profile(first_name, last_name)
        if profile is None:
            raise NotFoundError.medical_profile(first_name, last_name)
        return profile

    def list_records(self) -> list[MedicalProfile]:
        return list(self._store.snapshot().profiles)
