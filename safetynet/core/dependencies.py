# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from safetynet.core.config import settings
from safetynet.repositories.data_file_repository import DataFileRepository
from safetynet.repositories.record_store import RecordStore
from safetynet.services.fire_station_service import FireStationService
from safetynet.services.medical_record_service import MedicalRecordService
from safetynet.services.person_service import PersonService
from safetynet.services.resolver import Resolver

# ── Singleton repository instances ──
_record_store = RecordStore()
_data_file_repo = DataFileRepository(settings.DATA_FILE_PATH, backup=settings.BACKUP_ON_SAVE)

_on_change = _data_file_repo.save if settings.PERSIST_ON_MUTATION else None

# ── Service instances (with injected dependencies) ──
_person_service = PersonService(_record_store, on_change=_on_change)
_fire_station_service = FireStationService(_record_store, on_change=_on_change)
_medical_record_service = MedicalRecordService(_record_store, on_change=_on_change)
_resolver = Resolver(_record_store)


# ── FastAPI dependency functions ──
def get_record_store() -> RecordStore:
    return _record_store


def get_data_file_repo() -> DataFileRepository:
    return _data_file_repo


def get_person_service() -> PersonService:
    return _person_service


def get_fire_station_service() -> FireStationService:
    return _fire_station_service


def get_medical_record_service() -> MedicalRecordService:
    return _medical_record_service


def get_resolver() -> Resolver:
    return _resolver
