"""Core engine: snapshot store, per-locale mutations, validator, collapse state."""
from locsync.core.collapse import CollapseState
from locsync.core.persistence import SnapshotPersistence
from locsync.core.snapshot_store import SnapshotStore

__all__ = ["CollapseState", "SnapshotPersistence", "SnapshotStore"]
