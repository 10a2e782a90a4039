# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: shared plumbing for the record CRUD services.
Coordinates store writes with metrics and the optional save to disk.
"""

from typing import Any, Callable, Optional

from safetynet.core.logging import get_logger
from safetynet.metrics.prometheus import RECORD_MUTATIONS, RECORDS
from safetynet.repositories.record_store import RecordStore, Snapshot

logger = get_logger(__name__)

SnapshotSink = Callable[[Snapshot], Any]


class RecordService:
    """Base class for services that mutate the record store."""

    entity: str = "record"

    def __init__(self, store: RecordStore, on_change: Optional[SnapshotSink] = None) -> None:
        self._store = store
        self._on_change = on_change

    def _committed(self, action: str) -> None:
        """Record a successful write and hand the new snapshot to the sink."""
        RECORD_MUTATIONS.labels(entity=self.entity, action=action).inc()
        snapshot = self._store.snapshot()
        update_record_gauges(snapshot)
        logger.debug(
            "Committed %s %s, now v%d", self.entity, action, snapshot.version,
            extra={"entity": self.entity, "action": action, "data_version": snapshot.version},
        )
        if self._on_change is not None:
            self._on_change(snapshot)


def update_record_gauges(snapshot: Snapshot) -> None:
    for entity, count in snapshot.counts().items():
        RECORDS.labels(entity=entity).set(count)
