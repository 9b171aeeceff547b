"""In-memory TTL cache keyed by request path, one instance per resource type."""

from __future__ import annotations

import time
from typing import Any, NamedTuple


class Outcome:
    """Result of an API call: either a parsed payload or the error it raised."""

    __slots__ = ("payload", "error")

    def __init__(self, payload: Any = None, error: BaseException | None = None) -> None:
        self.payload = payload
        self.error = error

    @classmethod
    def ok(cls, payload: Any) -> Outcome:
        return cls(payload=payload)

    @classmethod
    def failed(cls, error: BaseException) -> Outcome:
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Any:
        """Return the payload, or raise the stored error."""
        if self.error is not None:
            raise self.error.with_traceback(None)
        return self.payload


class CacheEntry(NamedTuple):
    outcome: Outcome
    expires_at: float


class TTLCache:
    """Simple in-memory cache where every entry lives for the same TTL.

    A TTL of zero or less disables caching entirely.
    """

    def __init__(self, ttl: float) -> None:
        self.ttl = ttl
        self._store: dict[str, CacheEntry] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def retrieve(self, key: str) -> Outcome | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if time.monotonic() >= entry.expires_at:
            del self._store[key]
            return None
        return entry.outcome

    def add(self, key: str, outcome: Outcome) -> None:
        if not self.enabled:
            return
        self._store[key] = CacheEntry(outcome, time.monotonic() + self.ttl)

    def invalidate(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
