"""Thread-safe fill-on-miss memoization for loaded resources.

Architecture:
    - Store-wide RLock guards the entry table and per-key lock table
    - Per-key Lock serializes computation, so concurrent misses on the same
      key trigger exactly one compute() call
    - Entries never expire (memoization, not a TTL cache)
    - A compute() that raises leaves no entry behind

Python 3.13+.
"""

from collections.abc import Callable, Hashable
from threading import Lock, RLock

__all__ = ["MemoCache"]


class MemoCache[K: Hashable, V]:
    """Memo table with an atomic fetch-or-compute operation per key.

    Attributes:
        loads: Number of successful computations stored
    """

    __slots__ = ("_entries", "_key_locks", "_loads", "_lock")

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self._key_locks: dict[K, Lock] = {}
        self._lock = RLock()
        self._loads = 0

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        """Return the value for key, computing it on first request.

        Thread-safe. Concurrent callers missing on the same key block on a
        per-key lock; only the first runs compute(), the rest read its
        result. Callers on different keys do not block each other.

        Args:
            key: Cache key
            compute: Zero-argument function producing the value

        Returns:
            Cached or freshly computed value

        Raises:
            Exception: Whatever compute() raises, unchanged. The slot stays
                empty so a later call retries.
        """
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            key_lock = self._key_locks.setdefault(key, Lock())

        with key_lock:
            try:
                with self._lock:
                    if key in self._entries:
                        return self._entries[key]

                value = compute()

                with self._lock:
                    self._entries[key] = value
                    self._loads += 1
                return value
            finally:
                with self._lock:
                    if self._key_locks.get(key) is key_lock:
                        del self._key_locks[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> tuple[K, ...]:
        """Snapshot of cached keys in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        """Drop all entries and reset the load counter.

        Thread-safe. Computations already in flight still store their result.
        """
        with self._lock:
            self._entries.clear()
            self._loads = 0

    @property
    def loads(self) -> int:
        """Number of successful computations stored.

        Thread-safe.
        """
        with self._lock:
            return self._loads
