"""Shared test doubles: memory backends plus a scripted HTTP transport."""

from __future__ import annotations

from marketplace_connector.core.exceptions import CacheError, CredentialStoreError, TransportError
from marketplace_connector.models.connector import Credentials, HttpResponse
from marketplace_connector.persistence.memory_backend import (
    MemoryCacheBackend,
    MemoryCredentialStore,
)

BASE_URL = "https://marketplace.test"
API_URL = f"{BASE_URL}/rest/2"
LICENSES_CSV = (
    "License Id,Company,Amount,Notes\n"
    "SEN-1,Acme,42,\"first line\nsecond line\"\n"
    "SEN-2,Globex,17.5,plain\n"
)


class FakeTransport:
    """IHttpTransport returning canned responses by URL prefix and recording calls."""

    def __init__(self, default: HttpResponse | None = None) -> None:
        self._responses: dict[str, HttpResponse | Exception] = {}
        self._default = default or HttpResponse(status_code=404, text="")
        self.calls: list[tuple[str, dict[str, str]]] = []

    def set_response(self, url_prefix: str, response: HttpResponse | Exception) -> None:
        self._responses[url_prefix] = response

    def fetch(self, url: str, headers: dict[str, str]) -> HttpResponse:
        self.calls.append((url, headers))
        for prefix, response in self._responses.items():
            if url.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        return self._default


class UnavailableCacheBackend:
    """ICacheBackend whose every call fails, like an unreachable Redis."""

    def get(self, key: str) -> str | None:
        raise CacheError(f"GET {key} failed: connection refused")

    def setex(self, key: str, ttl: int, value: str) -> None:
        raise CacheError(f"SETEX {key} failed: connection refused")

    def delete(self, key: str) -> None:
        raise CacheError(f"DELETE {key} failed: connection refused")



class FailingCredentialStore:
    """ICredentialStore whose writes and deletes fail, like an unreachable DynamoDB table."""

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials

    def get(self) -> Credentials | None:
        return self._credentials

    def set(self, credentials: Credentials) -> None:
        raise CredentialStoreError("PutItem failed: ResourceNotFoundException")

    def clear(self) -> None:
        raise CredentialStoreError("DeleteItem failed: ResourceNotFoundException")


__all__ = [
    "API_URL",
    "BASE_URL",
    "FailingCredentialStore",
    "LICENSES_CSV",
    "FakeTransport",
    "MemoryCacheBackend",
    "MemoryCredentialStore",
    "TransportError",
    "UnavailableCacheBackend",
]
