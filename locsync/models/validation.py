"""Translation completeness results (derived, never persisted)."""
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class IncompleteItem:
    """A reference-locale record with fields missing in other locales."""
    record_id: Any
    missing_fields: List[str]  # "<locale>.<field>"


@dataclass
class ValidationResult:
    record_type: str
    incomplete_items: List[IncompleteItem] = field(default_factory=list)

    @property
    def has_incomplete_translations(self) -> bool:
        return len(self.incomplete_items) > 0

    def to_dict(self) -> dict:
        return {
            "record_type": self.record_type,
            "has_incomplete_translations": self.has_incomplete_translations,
            "incomplete_items": [
                {"id": item.record_id, "missing_fields": list(item.missing_fields)}
                for item in self.incomplete_items
            ],
        }
