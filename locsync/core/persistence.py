"""Best-effort on-disk copy of the current snapshot (one JSON document under a fixed key)."""
import json
import logging
from pathlib import Path
from typing import Optional

from locsync.config import SNAPSHOT_PATH
from locsync.models.record_types import Dataset

logger = logging.getLogger(__name__)


class SnapshotPersistence:
    """Save, load and clear the persisted snapshot.

    Failures never propagate: the in-memory snapshot stays authoritative for the
    session, so every error is logged and swallowed.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else SNAPSHOT_PATH

    @property
    def path(self) -> Path:
        return self._path

    def save(self, dataset: Dataset) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(dataset), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not save snapshot to %s: %s", self._path, e)

    def load(self) -> Optional[Dataset]:
        try:
            if not self._path.exists():
                return None
            text = self._path.read_text(encoding="utf-8")
            return json.loads(text) if text.strip() else None
        except (OSError, ValueError) as e:
            logger.warning("Could not load snapshot from %s: %s", self._path, e)
            return None

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not clear snapshot at %s: %s", self._path, e)

    def exists(self) -> bool:
        try:
            return self._path.exists() and self._path.read_text(encoding="utf-8").strip() != ""
        except (OSError, ValueError) as e:
            logger.warning("Could not read snapshot at %s: %s", self._path, e)
            return False
