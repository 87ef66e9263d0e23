"""Fixed-size transposition table for remembering search results."""

from __future__ import annotations

MISSING = 100
DEFAULT_SIZE = 1_000_000


def _to_int8(value: int) -> int:
    """Wrap an integer into the signed 8-bit range."""
    return ((value + 128) % 256) - 128


class TranspositionTable:
    """A direct-mapped cache from 64-bit position keys to small scores.

    Each key maps to exactly one slot (``key % size``); a newer entry
    silently replaces whatever occupied its slot. Unused slots behave as if
    they held key 0 with value 0.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: dict[int, tuple[int, int]] = {}

    def clear(self) -> None:
        """Forget every stored entry."""
        self._slots.clear()

    def put(self, key: int, value: int) -> None:
        """Store ``value`` for ``key``, evicting the slot's previous entry."""
        self._slots[key % self.size] = (key, _to_int8(value))

    def get(self, key: int) -> int:
        """Return the stored value for ``key``, or ``MISSING`` if absent."""
        stored_key, value = self._slots.get(key % self.size, (0, 0))
        if stored_key == key:
            return value
        return MISSING

    def __len__(self) -> int:
        return len(self._slots)