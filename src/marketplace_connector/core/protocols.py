"""Protocol interfaces for the connector's external collaborators.

The dataset service only talks to these Protocols, so every collaborator can
be swapped for an in-memory fake in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from marketplace_connector.models.connector import Credentials, HttpResponse


# ---------------------------------------------------------------------------
# Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible key/value cache with TTL."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Credential Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ICredentialStore(Protocol):
    """Per-user storage for Marketplace username/password."""

    def get(self) -> Credentials | None: ...

    def set(self, credentials: Credentials) -> None: ...

    def clear(self) -> None: ...


# ---------------------------------------------------------------------------
# HTTP Transport
# ---------------------------------------------------------------------------

@runtime_checkable
class IHttpTransport(Protocol):
    """Blocking HTTP GET. Raises TransportError on network-level failure."""

    def fetch(self, url: str, headers: dict[str, str]) -> HttpResponse: ...
