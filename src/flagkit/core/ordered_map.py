"""Insertion-ordered map from string keys to values.

Data is stored as a ``dict`` of key → record plus a ``list`` of keys
that tracks the order.  The two are always updated together: every key
in the list has exactly one entry in the dict and vice versa.

Guarantees
----------
* Iteration order is insertion order, unless :meth:`OrderedMap.insert`
  placed a key at an explicit position.
* Failed operations leave the map unchanged.
* No locking — single-threaded use only.  Do not mutate a map while
  iterating over it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from loguru import logger

from flagkit.exceptions import (
    KeyAlreadyExistsError,
    KeyNotFoundError,
    PositionOutOfRangeError,
)

V = TypeVar("V")


class OrderedMap(Generic[V]):
    """Ordered map that stores records by string key in insertion order.

    Usage::

        omap: OrderedMap[int] = OrderedMap()
        omap.append("one", 1)
        omap.insert("zero", 0, 0)
        omap.keys()     # ["zero", "one"]
        omap.records()  # [0, 1]
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._data: dict[str, V] = {}

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def keys(self) -> list[str]:
        """Return all keys in order (a copy)."""
        return list(self._keys)

    def records(self) -> list[V]:
        """Return all records in order of the keys."""
        return [self._data[key] for key in self._keys]

    def get(self, key: str) -> V:
        """Return the record stored under *key*.

        Raises
        ------
        KeyNotFoundError
            If *key* is not present.
        """
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(f"key not found: {key!r}") from None

    def iterate(self) -> Iterator[tuple[str, V]]:
        """Yield ``(key, record)`` pairs in order.

        The key order is captured when the call is made, so every call
        starts a fresh, finite pass.
        """
        for key in tuple(self._keys):
            yield key, self._data[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {record!r}" for key, record in self.iterate())
        return f"{type(self).__name__}({{{pairs}}})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, key: str, record: V, position: int) -> None:
        """Insert *record* under *key* at *position*.

        Keys at or after *position* shift one slot later.  To add a
        record at the end, use :meth:`append`.

        Raises
        ------
        PositionOutOfRangeError
            If *position* is not within ``0..len(self)``.
        KeyAlreadyExistsError
            If *key* is already present.
        """
        if position < 0 or position > len(self._keys):
            raise PositionOutOfRangeError(
                f"position out of range: {position} (length {len(self._keys)})",
            )
        if key in self._data:
            raise KeyAlreadyExistsError(f"key already exists: {key!r}")
        self._keys.insert(position, key)
        self._data[key] = record
        logger.debug("Inserted key {!r} at position {}", key, position)

    def append(self, key: str, record: V) -> None:
        """Add *record* under *key* at the end.

        Raises
        ------
        KeyAlreadyExistsError
            If *key* is already present.
        """
        self.insert(key, record, len(self._keys))

    def delete(self, key: str) -> None:
        """Remove *key* and its record.

        Raises
        ------
        KeyNotFoundError
            If *key* is not present.
        """
        if key not in self._data:
            raise KeyNotFoundError(f"key not found: {key!r}")
        del self._data[key]
        self._keys.remove(key)
        logger.debug("Deleted key {!r}", key)

    def reset(self) -> None:
        """Discard all keys and records."""
        self._keys = []
        self._data = {}
