# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the record store and the data file repository."""
from safetynet.repositories.record_store import RecordStore, Snapshot
from safetynet.repositories.data_file_repository import DataFileRepository

__all__ = ["RecordStore", "Snapshot", "DataFileRepository"]
