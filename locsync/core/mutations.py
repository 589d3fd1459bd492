"""Per-locale mutations: each builds a new dataset from the current one and replaces it."""
import copy
import logging
from typing import Any, Dict, List, Optional, Union

from locsync.core.snapshot_store import SnapshotStore
from locsync.errors import UnsupportedOperation
from locsync.models.record_types import (
    LOCALES,
    Dataset,
    FieldKind,
    Locale,
    RecordType,
    get_record_type,
)

logger = logging.getLogger(__name__)

LocaleLike = Union[Locale, str]


def _code(locale: LocaleLike) -> str:
    return Locale(locale).value


def _with_section(dataset: Dataset, name: str, section: Dict[str, Any]) -> Dataset:
    updated = dict(dataset)
    updated[name] = section
    return updated


def key_text(value: Any) -> str:
    """Render a key the way the editor compares keys: 7, 7.0 and "7" are the same key."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return "null"
    return str(value)


def make_stub(record_type: RecordType, record: Dict[str, Any], title_field: Optional[str]) -> Dict[str, Any]:
    """Copy of record for a non-source locale: text blanked, structural data kept.

    The key field and title_field are copied as-is.
    """
    stub: Dict[str, Any] = {}
    for name, value in record.items():
        if name == title_field or name == record_type.key_field:
            stub[name] = copy.deepcopy(value)
            continue
        kind = record_type.field_kind(name, value)
        if kind is FieldKind.TEXT:
            stub[name] = ""
        elif kind is FieldKind.SEQUENCE:
            stub[name] = []
        else:
            stub[name] = copy.deepcopy(value)
    return stub


def set_locale_value(store: SnapshotStore, record_type: str, locale: LocaleLike, payload: Any) -> Optional[Dataset]:
    """Replace the whole (record_type, locale) payload; other entries are untouched."""
    get_record_type(record_type)
    dataset = store.get_snapshot()
    if dataset is None:
        return None
    section = dict(dataset.get(record_type) or {})
    section[_code(locale)] = copy.deepcopy(payload)
    updated = _with_section(dataset, record_type, section)
    store.replace(updated)
    return updated


def create_across_locales(
    store: SnapshotStore,
    record_type: str,
    source_locale: LocaleLike,
    record: Dict[str, Any],
    title_field: Optional[str] = None,
) -> Optional[Dataset]:
    """Append record to source_locale and a stub of it to every other locale."""
    rt = get_record_type(record_type)
    if not rt.is_list:
        raise UnsupportedOperation(
            f"{record_type} is a singleton; edit it per locale with set_locale_value"
        )
    dataset = store.get_snapshot()
    if dataset is None:
        return None

    source = _code(source_locale)
    title = title_field if title_field is not None else rt.title_field
    section = dict(dataset.get(record_type) or {})
    for locale in LOCALES:
        code = locale.value
        current = section.get(code)
        if current is None:
            current = []
        if not isinstance(current, list):
            continue
        if code == source:
            added = copy.deepcopy(record)
        else:
            added = make_stub(rt, record, title)
        section[code] = current + [added]

    updated = _with_section(dataset, record_type, section)
    store.replace(updated)
    logger.debug("Created %s record %r from %s", record_type, rt.key_of(record), source)
    return updated


def delete_across_locales(
    store: SnapshotStore,
    record_type: str,
    key: Any,
    key_field: Optional[str] = None,
) -> Optional[Dataset]:
    """Remove records whose key (compared as text) equals key, in every locale."""
    rt = get_record_type(record_type)
    field_name = key_field if key_field is not None else rt.key_field
    if field_name is None:
        raise UnsupportedOperation(
            f"{record_type} records have no stable key; delete them by index"
        )
    dataset = store.get_snapshot()
    if dataset is None:
        return None

    wanted = key_text(key)
    section = dict(dataset.get(record_type) or {})
    for locale in LOCALES:
        current = section.get(locale.value)
        if not isinstance(current, list):
            continue
        section[locale.value] = [
            item
            for item in current
            if not isinstance(item, dict) or key_text(item.get(field_name)) != wanted
        ]

    updated = _with_section(dataset, record_type, section)
    store.replace(updated)
    logger.info("Deleted %s record %s=%s across locales", record_type, field_name, wanted)
    return updated


def delete_across_locales_by_index(store: SnapshotStore, record_type: str, index: int) -> Optional[Dataset]:
    """Remove the element at index from every locale list long enough to have one."""
    get_record_type(record_type)
    dataset = store.get_snapshot()
    if dataset is None:
        return None

    section = dict(dataset.get(record_type) or {})
    for locale in LOCALES:
        current = section.get(locale.value)
        if not isinstance(current, list):
            continue
        if 0 <= index < len(current):
            section[locale.value] = current[:index] + current[index + 1:]

    updated = _with_section(dataset, record_type, section)
    store.replace(updated)
    logger.info("Deleted %s record at index %d across locales", record_type, index)
    return updated


def next_record_id(store: SnapshotStore, record_type: str, locale: LocaleLike = Locale.EN) -> Any:
    """Key for a new record in locale: one past the largest numeric key.

    String-keyed types get the number as a string; position-only types get the
    next index and count-keyed types (cabins) the record count plus one. None
    when no data is loaded.
    """
    rt = get_record_type(record_type)
    if not rt.is_list:
        raise UnsupportedOperation(f"{record_type} is a singleton and has no record ids")
    dataset = store.get_snapshot()
    if dataset is None:
        return None
    records: List[Any] = (dataset.get(record_type) or {}).get(_code(locale)) or []
    if not rt.has_stable_key:
        return len(records)
    if rt.key_from_count:
        return len(records) + 1

    highest = 0
    for item in records:
        if not isinstance(item, dict):
            continue
        try:
            highest = max(highest, int(item.get(rt.key_field)))
        except (TypeError, ValueError):
            continue
    if rt.fields.get(rt.key_field) is FieldKind.TEXT:
        return str(highest + 1)
    return highest + 1
