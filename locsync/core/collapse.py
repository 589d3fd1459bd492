"""Collapsed/expanded item state for one editor view."""
import threading
from typing import FrozenSet, Iterable

# "Every item is collapsed unless tracked individually"
COLLAPSE_ALL = "*"


class CollapseState:
    """Set of collapsed item ids, or the COLLAPSE_ALL sentinel when ids are not known yet.

    Each transition replaces the whole set.
    """

    def __init__(self, collapsed: Iterable[str] = (COLLAPSE_ALL,)) -> None:
        self._lock = threading.Lock()
        self._collapsed: FrozenSet[str] = frozenset(collapsed)

    @property
    def collapsed(self) -> FrozenSet[str]:
        return self._collapsed

    @property
    def is_global(self) -> bool:
        return COLLAPSE_ALL in self._collapsed

    def is_collapsed(self, item_id: str) -> bool:
        collapsed = self._collapsed
        return COLLAPSE_ALL in collapsed or item_id in collapsed

    def toggle(self, item_id: str, all_ids: Iterable[str] = ()) -> FrozenSet[str]:
        """Flip one item.

        Leaving global mode expands item_id and tracks every other id in
        all_ids as collapsed, so nothing else changes on screen.
        """
        with self._lock:
            if COLLAPSE_ALL in self._collapsed:
                others = frozenset(i for i in all_ids if i != item_id)
                self._collapsed = (self._collapsed - {COLLAPSE_ALL, item_id}) | others
            elif item_id in self._collapsed:
                self._collapsed = self._collapsed - {item_id}
            else:
                self._collapsed = self._collapsed | {item_id}
            return self._collapsed

    def collapse_all(self, all_ids: Iterable[str] = ()) -> FrozenSet[str]:
        ids = frozenset(all_ids)
        with self._lock:
            self._collapsed = ids if ids else frozenset({COLLAPSE_ALL})
            return self._collapsed

    def expand_all(self) -> FrozenSet[str]:
        with self._lock:
            self._collapsed = frozenset()
            return self._collapsed
