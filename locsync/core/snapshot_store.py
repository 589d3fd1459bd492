"""Holder of the unified dataset with replace-and-persist semantics."""
import logging
from typing import Optional

from locsync.core.persistence import SnapshotPersistence
from locsync.models.record_types import Dataset

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Owns the current dataset; every change is a whole-value replace.

    No shape checks happen here: malformed data is accepted and surfaces later
    when consumers read it.
    """

    def __init__(self, persistence: Optional[SnapshotPersistence] = None) -> None:
        self._persistence = persistence if persistence is not None else SnapshotPersistence()
        self._snapshot: Optional[Dataset] = None

    @property
    def persistence(self) -> SnapshotPersistence:
        return self._persistence

    def get_snapshot(self) -> Optional[Dataset]:
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def replace(self, dataset: Dataset) -> None:
        self._snapshot = dataset
        self._persistence.save(dataset)

    def reset(self) -> None:
        self._snapshot = None
        self._persistence.clear()
        logger.info("Snapshot reset and stored copy cleared")

    def restore(self) -> bool:
        """Load the persisted snapshot into memory. Returns True if one was found."""
        stored = self._persistence.load()
        if stored is None:
            return False
        self._snapshot = stored
        logger.info("Restored snapshot from %s", self._persistence.path)
        return True

    def has_stored_data(self) -> bool:
        return self._persistence.exists()
