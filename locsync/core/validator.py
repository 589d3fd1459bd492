"""Translation completeness: which locales lag behind the reference locale."""
from typing import Any, Dict, List, Optional

from locsync.core.snapshot_store import SnapshotStore
from locsync.models.record_types import (
    LOCALES,
    REFERENCE_LOCALE,
    Dataset,
    get_record_type,
    record_type_names,
)
from locsync.models.validation import IncompleteItem, ValidationResult

ID_FIELD = "id"


def is_empty(value: Any) -> bool:
    """Empty string, None/absent, or an empty list."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, list):
        return len(value) == 0
    return False


def _find_by_id(records: List[Any], record_id: Any) -> Optional[Dict[str, Any]]:
    for item in records:
        if isinstance(item, dict) and ID_FIELD in item and item[ID_FIELD] == record_id:
            return item
    return None


def validate_dataset(dataset: Optional[Dataset], record_type: str) -> ValidationResult:
    """Compare every reference-locale record with the same id in the other locales.

    A field is missing for a locale when the reference value is non-empty and
    the locale's value is empty. Locales lacking the record entirely are not
    reported. Types outside validator coverage always come back complete.
    """
    rt = get_record_type(record_type)
    result = ValidationResult(record_type=record_type)
    if dataset is None or not rt.is_list or not rt.validated:
        return result
    section = dataset.get(record_type)
    if not isinstance(section, dict):
        return result
    reference = section.get(REFERENCE_LOCALE.value)
    if not isinstance(reference, list):
        return result

    for item in reference:
        if not isinstance(item, dict) or ID_FIELD not in item:
            continue
        missing: List[str] = []
        for locale in LOCALES:
            if locale is REFERENCE_LOCALE:
                continue
            records = section.get(locale.value)
            if not isinstance(records, list):
                continue
            counterpart = _find_by_id(records, item[ID_FIELD])
            if counterpart is None:
                continue
            for name, value in item.items():
                if name == ID_FIELD:
                    continue
                if not is_empty(value) and is_empty(counterpart.get(name)):
                    field_key = f"{locale.value}.{name}"
                    if field_key not in missing:
                        missing.append(field_key)
        if missing:
            result.incomplete_items.append(IncompleteItem(record_id=item[ID_FIELD], missing_fields=missing))
    return result


def validate(store: SnapshotStore, record_type: str) -> ValidationResult:
    return validate_dataset(store.get_snapshot(), record_type)


def validate_all(store: SnapshotStore) -> Dict[str, ValidationResult]:
    dataset = store.get_snapshot()
    return {name: validate_dataset(dataset, name) for name in record_type_names()}
