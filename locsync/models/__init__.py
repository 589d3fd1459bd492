"""Data models for locales, record types, and validation results."""
from locsync.models.record_types import (
    LOCALES,
    Dataset,
    REFERENCE_LOCALE,
    FieldKind,
    Locale,
    RecordType,
    Shape,
    get_record_type,
)
from locsync.models.validation import IncompleteItem, ValidationResult

__all__ = [
    "LOCALES",
    "Dataset",
    "REFERENCE_LOCALE",
    "FieldKind",
    "Locale",
    "RecordType",
    "Shape",
    "get_record_type",
    "IncompleteItem",
    "ValidationResult",
]
