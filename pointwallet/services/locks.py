from __future__ import annotations

import threading
from collections.abc import Hashable


class KeyedLocks:
    """Lazily created lock per key.

    Entries are never evicted; the map grows with the set of mutated user ids,
    the same as the balance table.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}

    def get(self, key: Hashable) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
