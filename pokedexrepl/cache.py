"""A thread-safe, time-expiring cache for raw response bodies."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class _Entry:
    value: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Maps keys to byte payloads, dropping entries older than ``ttl`` seconds.

    A background thread sweeps the cache once every ``ttl`` seconds until
    :meth:`close` is called.
    """

    def __init__(self, ttl: float) -> None:
        if ttl <= 0:
            raise ValueError(f"cache ttl must be positive, got {ttl!r}")
        self._ttl = float(ttl)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def ttl(self) -> float:
        """Lifetime of an entry, in seconds."""
        return self._ttl

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, resetting its age."""
        with self._lock:
            self._entries[key] = _Entry(bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the payload stored under ``key``, or None if absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self) -> int:
        """Remove every entry older than the ttl; return how many were removed."""
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self._ttl
            ]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def close(self) -> None:
        """Stop the background sweeper. Stored entries are kept."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self._ttl):
            self.reap()