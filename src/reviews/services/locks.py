"""Per-key mutual exclusion for read-modify-write cycles on one aggregate."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0  # holders plus waiters


class KeyedLocks:
    """One lock per key, alive only while someone holds or waits for it.

    Holding the lock for a review id serializes load, mutate and save of that
    review within this process. Different keys never block each other.
    Entries are dropped when their last user leaves, so arbitrary keys
    (including ids of reviews that do not exist) leave nothing behind.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def _acquire_entry(self, key: str) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.users += 1
            return entry

    def _release_entry(self, key: str, entry: _Entry) -> None:
        with self._guard:
            entry.users -= 1
            if entry.users == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        key = str(key)
        entry = self._acquire_entry(key)
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry(key, entry)
