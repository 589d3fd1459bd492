"""Locales and the closed set of record types with their per-field classification."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from locsync.errors import UnknownRecordType


class Locale(str, Enum):
    EN = "en"
    DE = "de"
    NL = "nl"


LOCALES: Tuple[Locale, ...] = (Locale.EN, Locale.DE, Locale.NL)

# Baseline for translation completeness
REFERENCE_LOCALE = Locale.EN

# record type name -> locale code -> list of records or a single object
Dataset = Dict[str, Dict[str, Any]]


class Shape(str, Enum):
    LIST = "list"
    SINGLETON = "singleton"


class FieldKind(str, Enum):
    """How a field behaves when a record is stubbed into another locale."""
    TEXT = "text"  # translatable, blanked to ""
    SEQUENCE = "sequence"  # blanked to []
    STRUCTURAL = "structural"  # numbers, flags, coordinates: copied unchanged
    NESTED = "nested"  # nested objects: copied unchanged


@dataclass(frozen=True)
class RecordType:
    """A logical collection kept in parallel for every locale."""
    name: str
    shape: Shape
    # None means position-only: records have no stable key
    key_field: Optional[str] = None
    title_field: Optional[str] = None
    fields: Mapping[str, FieldKind] = field(default_factory=dict)
    validated: bool = False
    # New keys are numbered from the record count rather than the largest key
    key_from_count: bool = False

    @property
    def is_list(self) -> bool:
        return self.shape is Shape.LIST

    @property
    def has_stable_key(self) -> bool:
        return self.key_field is not None

    def key_of(self, record: Mapping[str, Any]) -> Any:
        """Return the record's key value, or None if the type is position-only."""
        if self.key_field is None:
            return None
        return record.get(self.key_field)

    def empty_payload(self) -> Any:
        return [] if self.is_list else {}

    def field_kind(self, name: str, value: Any) -> FieldKind:
        """Look up the field's kind.

        Unlisted fields, and listed ones whose value does not have the declared
        shape (a number where text was expected, say), are classified by value.
        """
        kind = self.fields.get(name)
        if kind is None or not _accepts(kind, value):
            return classify_value(value)
        return kind


def _accepts(kind: FieldKind, value: Any) -> bool:
    if kind is FieldKind.TEXT:
        return isinstance(value, str)
    if kind is FieldKind.SEQUENCE:
        return isinstance(value, list)
    if kind is FieldKind.NESTED:
        return isinstance(value, dict)
    return True


def classify_value(value: Any) -> FieldKind:
    if isinstance(value, str):
        return FieldKind.TEXT
    if isinstance(value, list):
        return FieldKind.SEQUENCE
    if isinstance(value, dict):
        return FieldKind.NESTED
    return FieldKind.STRUCTURAL


T, S, N, O = FieldKind.TEXT, FieldKind.SEQUENCE, FieldKind.STRUCTURAL, FieldKind.NESTED

RECORD_TYPES: Dict[str, RecordType] = {
    rt.name: rt
    for rt in (
        RecordType(
            "recipes",
            Shape.LIST,
            key_field="id",
            title_field="title",
            fields={
                "id": T,
                "title": T,
                "description": T,
                "type": T,
                "ingredients": S,
                "spices": S,
                "instructions": T,
            },
            validated=True,
        ),
        RecordType(
            "checklists",
            Shape.LIST,
            key_field="id",
            title_field="title",
            fields={"id": T, "title": T, "description": T, "icon": T, "tasks": S},
            validated=True,
        ),
        RecordType(
            "cities",
            Shape.LIST,
            key_field="id",
            title_field="name",
            fields={
                "id": N,
                "name": T,
                "latitude": N,
                "longitude": N,
                "description": T,
                "zoomLevel": N,
                "isIsland": T,
            },
            validated=True,
        ),
        RecordType(
            "points",
            Shape.LIST,
            key_field="id",
            title_field="name",
            fields={
                "id": N,
                "latitude": N,
                "longitude": N,
                "type": T,
                "name": T,
                "description": T,
                "cityId": N,
            },
            validated=True,
        ),
        RecordType(
            "cabins",
            Shape.LIST,
            key_field="cabinNr",
            title_field="comment",
            fields={"cabinNr": N, "posTop": N, "posLeft": N, "beds": N, "comment": T},
            key_from_count=True,
        ),
        RecordType(
            "questions",
            Shape.LIST,
            title_field="questiontext",
            fields={"questiontext": T, "answertext": T},
        ),
        RecordType(
            "links",
            Shape.SINGLETON,
            fields={
                "phone": T,
                "mail": T,
                "instagram": T,
                "facebook": T,
                "youtube": T,
                "historyLink": T,
                "factLink": T,
                "bookingLink": T,
                "companyName": T,
                "skipperName": T,
                "claim": T,
                "links": O,
            },
        ),
        RecordType(
            "about",
            Shape.SINGLETON,
            fields={"facts": S, "history": T, "captainImage": T, "vita": T},
        ),
    )
}

del T, S, N, O


def get_record_type(name: str) -> RecordType:
    try:
        return RECORD_TYPES[name]
    except KeyError:
        raise UnknownRecordType(name) from None


def record_type_names() -> List[str]:
    return list(RECORD_TYPES)
