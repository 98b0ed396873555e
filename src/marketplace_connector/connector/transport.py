"""requests-based HTTP transport implementing IHttpTransport."""

from __future__ import annotations

import requests

from marketplace_connector.core.exceptions import TransportError
from marketplace_connector.models.connector import HttpResponse


class RequestsHttpTransport:
    """Production IHttpTransport backed by a requests Session. No retries."""

    def __init__(self, timeout: int = 30, session: requests.Session | None = None) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch(self, url: str, headers: dict[str, str]) -> HttpResponse:
        try:
            resp = self._session.get(url, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc
        return HttpResponse(status_code=resp.status_code, text=resp.text)

    def close(self) -> None:
        self._session.close()
