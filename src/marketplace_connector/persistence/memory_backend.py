"""In-memory backends for local development and unit tests."""

from __future__ import annotations

import time
from collections.abc import Callable

from marketplace_connector.models.connector import Credentials


class MemoryCacheBackend:
    """Dict-backed ICacheBackend. Entries expire after their TTL."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._store: dict[str, tuple[float, str]] = {}
        self._clock = clock

    def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = (self._clock() + ttl, value)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class MemoryCredentialStore:
    """Process-local ICredentialStore."""

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials

    def get(self) -> Credentials | None:
        return self._credentials

    def set(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def clear(self) -> None:
        self._credentials = None
