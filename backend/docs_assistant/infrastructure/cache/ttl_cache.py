"""Time-bounded in-memory cache with an injectable clock."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Entry(Generic[V]):
    value: V
    stored_at: float


class TTLCache(Generic[K, V]):
    """Key/value cache whose entries go stale ``ttl_seconds`` after being stored.

    Stale entries are kept until overwritten or purged so callers can fall
    back to them when a refresh fails (see :meth:`get_stale`).
    """

    def __init__(
        self,
        ttl_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[K, _Entry[V]] = {}

    def get(self, key: K) -> V | None:
        """Return the value if it is still fresh, else None."""
        entry = self._entries.get(key)
        if entry is None or self._is_expired(entry):
            return None
        return entry.value

    def get_stale(self, key: K) -> V | None:
        """Return the value regardless of age."""
        entry = self._entries.get(key)
        return entry.value if entry else None

    def set(self, key: K, value: V) -> None:
        self._entries[key] = _Entry(value=value, stored_at=self._clock())

    def delete(self, key: K) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def purge_expired(self) -> int:
        """Drop every expired entry. Returns the number removed."""
        expired = [k for k, e in self._entries.items() if self._is_expired(e)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _is_expired(self, entry: _Entry[V]) -> bool:
        return self._clock() - entry.stored_at >= self._ttl
