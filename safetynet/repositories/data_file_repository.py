# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: JSON data file access.
Loads the three collections into the record store at startup and writes the
current snapshot back after mutations.
"""

import os
import shutil
import threading
from pathlib import Path
from typing import Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from safetynet.core.errors import DataLoadError
from safetynet.core.logging import get_logger
from safetynet.models.domain import MedicalProfile, Resident, StationAssignment
from safetynet.repositories.record_store import RecordStore, Snapshot

logger = get_logger(__name__)


class DataDocument(BaseModel):
    """Top-level shape of the data file."""
    model_config = ConfigDict(extra="ignore")

    persons: list[Resident] = Field(default_factory=list)
    firestations: list[StationAssignment] = Field(
        default_factory=list,
        validation_alias=AliasChoices("firestations", "fireStations"),
    )
    medicalrecords: list[MedicalProfile] = Field(
        default_factory=list,
        validation_alias=AliasChoices("medicalrecords", "medicalRecords"),
    )

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "DataDocument":
        return cls(
            persons=list(snapshot.residents),
            firestations=list(snapshot.stations),
            medicalrecords=list(snapshot.profiles),
        )


class DataFileRepository:
    """Reads and writes the JSON data file."""

    def __init__(self, path: Union[str, Path], backup: bool = True) -> None:
        self._path = Path(path)
        self._backup = backup
        self._lock = threading.Lock()
        self._last_saved_version = -1

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + ".backup")

    # ── Read ──

    def load(self) -> DataDocument:
        """Parse the data file. A missing file yields an empty document."""
        if not self._path.exists():
            logger.warning("Data file not found at %s, starting with empty data", self._path)
            return DataDocument()
        try:
            document = DataDocument.model_validate_json(self._path.read_bytes())
        except (OSError, PydanticValidationError) as e:
            logger.error("Failed to load data from %s", self._path, exc_info=True)
            raise DataLoadError(str(self._path), str(e)) from e
        logger.info(
            "Data loaded from %s: persons=%d, firestations=%d, medicalrecords=%d",
            self._path,
            len(document.persons),
            len(document.firestations),
            len(document.medicalrecords),
        )
        return document

    def load_into(self, store: RecordStore) -> Snapshot:
        """Replace the store content with the data file content."""
        document = self.load()
        dropped = store.replace_all(
            document.persons, document.firestations, document.medicalrecords
        )
        for assignment in dropped:
            logger.warning(
                "Duplicate fire station mapping ignored: address=%s, station=%d",
                assignment.address, assignment.station,
            )
        snapshot = store.snapshot()
        self._last_saved_version = snapshot.version
        return snapshot

    # ── Write ──

    def save(self, snapshot: Snapshot) -> bool:
        """Write a snapshot to disk. Older snapshots than the last saved are skipped."""
        with self._lock:
            if snapshot.version < self._last_saved_version:
                logger.debug(
                    "Skipping save of stale snapshot v%d (last saved v%d)",
                    snapshot.version, self._last_saved_version,
                )
                return False

            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._backup and self._path.exists():
                shutil.copy2(self._path, self.backup_path)

            payload = DataDocument.from_snapshot(snapshot).model_dump_json(
                by_alias=True, indent=2
            )
            tmp_path = self._path.with_name(self._path.name + ".tmp")
            try:
                tmp_path.write_text(payload, encoding="utf-8")
                os.replace(tmp_path, self._path)
            finally:
                tmp_path.unlink(missing_ok=True)

            self._last_saved_version = snapshot.version
        logger.info(
            "Data saved to %s (v%d)", self._path, snapshot.version,
            extra={"data_version": snapshot.version},
        )
        return True
