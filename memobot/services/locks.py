"""Per-key mutual exclusion."""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass
class _LockEntry:
    """A lock plus the number of callers holding or waiting on it."""

    lock: threading.Lock
    users: int = 0


class KeyedLock:
    """One mutex per key, created on demand.

    Callers using different keys never contend. An entry is discarded as
    soon as nobody holds or waits on it, so the registry only grows with
    the number of keys in flight.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, _LockEntry] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = _LockEntry(lock=threading.Lock())
                self._entries[key] = entry
            entry.users += 1

        entry.lock.acquire()
        try:
            yield
        finally:
            entry.lock.release()
            with self._lock:
                entry.users -= 1
                if entry.users == 0:
                    self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
