"""Errors raised by the sync engine."""


class LocSyncError(Exception):
    """Base class for engine errors."""


class UnknownRecordType(LocSyncError, KeyError):
    """Record type name is not part of the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown record type: {self.name}"


class UnsupportedOperation(LocSyncError):
    """Operation does not apply to the record type's shape or key capability."""


class DatasetParseError(LocSyncError):
    """Uploaded or stored text could not be parsed as a dataset."""
