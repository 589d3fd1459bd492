"""Shared application state (injected into routes)."""
import logging
import threading
from typing import Any, Dict, Optional

from locsync.core.collapse import CollapseState
from locsync.core.mutations import (
    create_across_locales,
    delete_across_locales,
    delete_across_locales_by_index,
    next_record_id,
    set_locale_value,
)
from locsync.core.snapshot_store import SnapshotStore
from locsync.core.transfer import empty_dataset, parse_dataset
from locsync.core.validator import validate, validate_all
from locsync.errors import DatasetParseError
from locsync.models.record_types import Dataset, Locale
from locsync.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class AppState:
    """Single writer for the dataset; the editor's collapse state lives here too.

    Routes run in a threadpool, so every read-compute-replace holds _lock.
    """

    def __init__(self, store: Optional[SnapshotStore] = None) -> None:
        self.store = store if store is not None else SnapshotStore()
        self._lock = threading.Lock()
        self._collapse: Dict[str, CollapseState] = {}
        self.error: Optional[str] = None

    def get_snapshot(self) -> Optional[Dataset]:
        return self.store.get_snapshot()

    def load(self, text: Optional[str]) -> Dataset:
        """Replace the dataset with an uploaded blob; on parse error the dataset is kept."""
        with self._lock:
            self.error = None
            try:
                dataset = parse_dataset(text)
            except DatasetParseError as e:
                self.error = str(e)
                logger.error("Failed to load data: %s", e)
                raise
            self.store.replace(dataset)
        logger.info("Loaded dataset with %d record types", len(dataset) if isinstance(dataset, dict) else 0)
        return dataset

    def new(self) -> Dataset:
        with self._lock:
            dataset = empty_dataset()
            self.store.replace(dataset)
            self.error = None
        return dataset

    def restore(self) -> bool:
        with self._lock:
            return self.store.restore()

    def has_stored_data(self) -> bool:
        return self.store.has_stored_data()

    def reset(self) -> None:
        with self._lock:
            self.store.reset()
            self.error = None

    def set_locale_value(self, record_type: str, locale: Locale, payload: Any) -> Optional[Dataset]:
        with self._lock:
            return set_locale_value(self.store, record_type, locale, payload)

    def create_across_locales(
        self, record_type: str, source_locale: Locale, record: Dict[str, Any], title_field: Optional[str] = None
    ) -> Optional[Dataset]:
        with self._lock:
            return create_across_locales(self.store, record_type, source_locale, record, title_field)

    def delete_across_locales(self, record_type: str, key: Any, key_field: Optional[str] = None) -> Optional[Dataset]:
        with self._lock:
            return delete_across_locales(self.store, record_type, key, key_field)

    def delete_across_locales_by_index(self, record_type: str, index: int) -> Optional[Dataset]:
        with self._lock:
            return delete_across_locales_by_index(self.store, record_type, index)

    def next_record_id(self, record_type: str, locale: Locale = Locale.EN) -> Any:
        return next_record_id(self.store, record_type, locale)

    def validate(self, record_type: str) -> ValidationResult:
        return validate(self.store, record_type)

    def validate_all(self) -> Dict[str, ValidationResult]:
        return validate_all(self.store)

    def collapse(self, view: str) -> CollapseState:
        """Collapse state for an editor view; starts with everything collapsed."""
        with self._lock:
            if view not in self._collapse:
                self._collapse[view] = CollapseState()
            return self._collapse[view]


_state = AppState()


def get_state() -> AppState:
    return _state
