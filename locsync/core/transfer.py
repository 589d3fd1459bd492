"""Load and export of the unified dataset (upload/download blobs, per-locale files)."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from locsync.errors import DatasetParseError
from locsync.models.record_types import LOCALES, Dataset, get_record_type, record_type_names

logger = logging.getLogger(__name__)


def empty_dataset() -> Dataset:
    """Every record type with an empty payload for every locale."""
    return {
        name: {locale.value: get_record_type(name).empty_payload() for locale in LOCALES}
        for name in record_type_names()
    }


def parse_dataset(text: Optional[str]) -> Dataset:
    """Parse an uploaded blob; an export wrapper's "data" member is unwrapped.

    The result is not checked against the record types.
    """
    if not text or not text.strip():
        raise DatasetParseError("No JSON data provided. Please upload a JSON file to get started.")
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetParseError(f"Invalid JSON: {e}") from e
    if parsed is None:
        raise DatasetParseError("JSON data is null; expected a dataset object")
    if _is_export(parsed):
        return parsed["data"]
    return parsed


def _is_export(parsed: Any) -> bool:
    """A truthy "data" member, or the empty dataset of an export wrapper."""
    if not isinstance(parsed, dict):
        return False
    data = parsed.get("data")
    return bool(data) or ("exportDate" in parsed and isinstance(data, dict))


def create_export(dataset: Dataset, export_date: Optional[datetime] = None) -> Dict[str, Any]:
    when = export_date or datetime.now(timezone.utc)
    return {
        "exportDate": when.isoformat().replace("+00:00", "Z"),
        "data": dataset,
    }


def serialize_export(dataset: Dataset, export_date: Optional[datetime] = None) -> str:
    return json.dumps(create_export(dataset, export_date), indent=2, ensure_ascii=False)


def export_individual_files(dataset: Dataset) -> Dict[str, Any]:
    """Split into the "<locale>/<type>.json" files the companion app ships with."""
    files: Dict[str, Any] = {}
    for locale in LOCALES:
        for name in record_type_names():
            files[f"{locale.value}/{name}.json"] = (dataset.get(name) or {}).get(locale.value)
    return files


def load_directory(root: Path) -> Dataset:
    """Build a unified dataset from a <locale>/<type>.json tree.

    Missing or unreadable files become empty payloads.
    """
    root = Path(root)
    dataset = empty_dataset()
    for locale in LOCALES:
        for name in record_type_names():
            p = root / locale.value / f"{name}.json"
            if not p.exists():
                logger.info("File not found: %s", p)
                continue
            try:
                dataset[name][locale.value] = json.loads(p.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Error loading %s for %s: %s", name, locale.value, e)
                continue
            logger.debug("Loaded %s for %s", name, locale.value)
    return dataset
