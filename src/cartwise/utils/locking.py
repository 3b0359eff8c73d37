"""Per-owner serialization of read-modify-write operations.

Cart mutations load the whole aggregate, change it and write it back. Two
requests for the same owner must not interleave between the load and the
commit, or one update is lost. Requests for different owners take different
locks and never wait on each other.

Owner ids come from request headers, so a lock only lives while some caller
holds or waits on it.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _OwnerLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class OwnerLocks:
    """A registry of one lock per owner id, dropped when its last user leaves."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _OwnerLock] = {}

    @contextmanager
    def hold(self, owner_id) -> Iterator[None]:
        key = str(owner_id)
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _OwnerLock()
            entry.users += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


owner_locks = OwnerLocks()
