"""Keyed re-entrant locks used to serialize writers per book and per customer."""

import threading
from contextlib import contextmanager


class _KeyLock:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.RLock()
        self.holders = 0


class KeyedLocks:
    """Lazily created re-entrant locks, one per key.

    ``hold`` acquires every requested key in sorted order so that two callers
    asking for overlapping key sets can never deadlock. A thread may re-enter
    keys it already holds; it must not acquire new keys while holding others.

    A key's lock exists only while some caller holds or waits for it, so the
    table does not grow with every isbn or customer id ever seen.
    """

    def __init__(self, name: str):
        self.name = name
        self._guard = threading.Lock()
        self._locks: dict[str, _KeyLock] = {}

    def _checkout(self, key: str) -> _KeyLock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _KeyLock()
            entry.holders += 1
            return entry

    def _checkin(self, key: str) -> None:
        with self._guard:
            entry = self._locks[key]
            entry.holders -= 1
            if entry.holders == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, *keys: str):
        ordered = sorted(set(keys))
        entries = [self._checkout(key) for key in ordered]
        acquired = []
        try:
            for entry in entries:
                entry.lock.acquire()
                acquired.append(entry)
            yield
        finally:
            for entry in reversed(acquired):
                entry.lock.release()
            for key in ordered:
                self._checkin(key)
