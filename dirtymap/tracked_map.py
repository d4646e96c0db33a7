"""
Tracked Map Implementation
==========================

A key/value map that remembers which keys were written since the last reset.

Every write goes through :meth:`TrackedMap.set`, which compares the previous
and new value with :func:`~dirtymap.equality.shallow_equal` and marks the key
dirty when the value changed. ``None`` counts as "no value" on both sides, so
a missing key and a key holding ``None`` look the same to the comparison.
Reads never touch the dirty set. Only :meth:`TrackedMap.reset` clears dirtiness.

Usage:
    row = TrackedMap({"a": 1})
    row.set("a", 1)       # same value, still clean
    row["b"] = 2          # new key, dirty
    row.dirty_slice()     # {"b": 2}
    row.reset()           # clean again, storage untouched

Thread Safety:
    None. Callers sharing an instance across threads must hold their own lock
    around every call.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Callable, Dict, Hashable, Iterator, List, Mapping, Optional

from .equality import shallow_equal

logger = logging.getLogger(__name__)


class TrackedMap(MutableMapping):
    """
    Mapping that records which keys changed since the last reset.

    Storage is a private dict seeded by shallow copy of ``initial``; stored
    values are shared with the caller, never cloned. Seeding does not mark
    anything dirty.

    A write marks its key dirty when exactly one of the old and new value is
    ``None`` (a missing key reads as ``None``), or when neither is and
    ``equal(old, new)`` is false. Deleting a key that holds a value other
    than ``None`` is a change of the same kind and marks it dirty.
    Once dirty, a key stays dirty until reset, even if its original value is
    written back.

    Index syntax, ``update``, ``setdefault``, ``pop``, ``popitem`` and
    ``clear`` all go through :meth:`set` and :meth:`delete`.
    """

    def __init__(
        self,
        initial: Optional[Mapping[Hashable, Any]] = None,
        *,
        equal: Callable[[Any, Any], bool] = shallow_equal,
    ):
        """
        Initialize the map.

        Args:
            initial: Mapping to seed storage from (copied, not marked dirty)
            equal: Comparison used by the dirtiness rule when neither value is None
        """
        self._storage: Dict[Hashable, Any] = (
            dict(initial) if initial is not None else {}
        )
        self._dirty: Dict[Hashable, bool] = {}
        self._equal = equal

        self._stats = {
            "gets": 0,
            "sets": 0,
            "deletes": 0,
            "resets": 0,
        }

    # ========================================================================
    # READS
    # ========================================================================

    def get(self, key: Hashable, default: Any = None) -> Any:
        """
        Get the current value for key.

        Args:
            key: The key to lookup
            default: Value to return if key is not stored

        Returns:
            The stored value, or default if not found
        """
        self._stats["gets"] += 1
        return self._storage.get(key, default)

    # ========================================================================
    # MUTATION PATH
    # ========================================================================

    def set(self, key: Hashable, value: Any) -> Any:
        """
        Store value at key, then mark key dirty if the write changed it.

        Returns:
            The written value
        """
        self._stats["sets"] += 1

        old = self._storage.get(key)
        self._storage[key] = value

        if key not in self._dirty and self._changed(old, value):
            self._mark(key)
        return value

    def delete(self, key: Hashable) -> bool:
        """
        Remove key from storage, marking it dirty unless it held None.

        Returns:
            True if key was deleted, False if key didn't exist
        """
        self._stats["deletes"] += 1

        if key not in self._storage:
            return False

        old = self._storage.pop(key)
        logger.debug("Deleted key %r", key)
        if old is not None:
            self._mark(key)
        return True

    def _changed(self, old: Any, new: Any) -> bool:
        if old is None or new is None:
            return old is not new
        return not self._equal(old, new)

    def _mark(self, key: Hashable) -> None:
        if key not in self._dirty:
            logger.debug("Key %r is now dirty", key)
        self._dirty[key] = True

    # ========================================================================
    # DIRTY TRACKING
    # ========================================================================

    def is_dirty(self, *keys: Hashable) -> bool:
        """
        Report dirtiness.

        With no arguments, True if any key is dirty. With keys, True if at
        least one of them is dirty.
        """
        if not keys:
            return bool(self._dirty)
        return any(key in self._dirty for key in keys)

    def reset(self, *keys: Hashable) -> None:
        """
        Clear dirty flags without touching stored values.

        With no arguments every key becomes clean. With keys, only those keys
        are cleaned; keys that were not dirty are ignored.
        """
        self._stats["resets"] += 1

        if not keys:
            logger.debug("Reset %d dirty key(s)", len(self._dirty))
            self._dirty = {}
            return

        for key in keys:
            if self._dirty.pop(key, None):
                logger.debug("Reset dirty key %r", key)

    def dirty(self) -> Dict[Hashable, bool]:
        """Return a new dict mapping each dirty key to True."""
        return dict(self._dirty)

    def dirty_keys(self) -> List[Hashable]:
        """Return a list of the dirty keys."""
        return list(self._dirty)

    def dirty_values(self, default: Any = None) -> List[Any]:
        """
        Return the current value of each dirty key, ordered like dirty_keys().

        These are present-day values, not the values at the moment the key
        became dirty. A dirty key that has since been deleted yields default.
        """
        return [self._storage.get(key, default) for key in self._dirty]

    def dirty_slice(self) -> Dict[Hashable, Any]:
        """Return a new dict of the stored dirty keys and their current values."""
        return {
            key: self._storage[key] for key in self._dirty if key in self._storage
        }

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about map operations.

        ``gets`` counts ``get()`` calls and ``m[key]`` lookups; iteration,
        ``in`` and the keys/values/items views are not counted.
        """
        stats = self._stats.copy()
        stats["total_keys"] = len(self._storage)
        stats["dirty_keys"] = len(self._dirty)
        return stats

    # ========================================================================
    # MAPPING PROTOCOL
    # ========================================================================

    def __getitem__(self, key: Hashable) -> Any:
        """Get value for key, raises KeyError if not found."""
        self._stats["gets"] += 1
        return self._storage[key]

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Hashable) -> None:
        """Delete key, raises KeyError if not found."""
        if not self.delete(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._storage!r}, dirty={self.dirty_keys()!r})"


def tracked_map(
    initial: Optional[Mapping[Hashable, Any]] = None,
    equal: Callable[[Any, Any], bool] = shallow_equal,
) -> TrackedMap:
    """
    Create a tracked map with specified settings.

    Args:
        initial: Mapping to seed storage from
        equal: Comparison used to decide whether a write changed a value

    Returns:
        Configured TrackedMap instance
    """
    return TrackedMap(initial, equal=equal)
