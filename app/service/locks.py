import threading
from contextlib import contextmanager
from typing import Dict


class KeyedLock:
    """One lock per key, created on first use. Serializes work inside this process only."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, key: str):
        lock = self._lock_for(key)
        with lock:
            yield

    def __len__(self):
        return len(self._locks)
