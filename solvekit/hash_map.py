"""Integer map over a bounded range of non-negative keys."""

from __future__ import annotations

MAX_KEY = 1_000_000
MISSING = -1


class DirectAddressMap:
    """Map from keys ``0 .. max_key`` to integers; absent keys read as -1."""

    def __init__(self, max_key: int = MAX_KEY) -> None:
        self.max_key = max_key
        self._items: dict[int, int] = {}

    def _check(self, key: int) -> None:
        if not 0 <= key <= self.max_key:
            raise KeyError(key)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``."""
        self._check(key)
        self._items[key] = value

    def get(self, key: int) -> int:
        """Value stored under ``key``, or -1 if there is none."""
        self._check(key)
        return self._items.get(key, MISSING)

    def remove(self, key: int) -> None:
        """Forget ``key``; nothing happens if it is absent."""
        self._check(key)
        self._items.pop(key, None)