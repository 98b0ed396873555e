"""Atlassian Marketplace REST API client for CSV exports and credential checks."""

from __future__ import annotations

import base64

from loguru import logger

from marketplace_connector.core.config import MarketplaceConfig
from marketplace_connector.core.exceptions import TransportError
from marketplace_connector.core.protocols import IHttpTransport
from marketplace_connector.models.connector import ConnectorConfig, Credentials


def basic_auth_header(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return {"Authorization": f"Basic {token}"}


class MarketplaceClient:
    """Thin client over an IHttpTransport for the vendor reporting API."""

    def __init__(self, transport: IHttpTransport, config: MarketplaceConfig | None = None) -> None:
        self._transport = transport
        self._config = config or MarketplaceConfig()

    def dataset_url(self, config: ConnectorConfig) -> str:
        return self._config.dataset_url(config.vendor_id, config.dataset_api_path)

    def fetch_csv(self, config: ConnectorConfig, credentials: Credentials) -> str:
        """Fetch the CSV export for ``config``.

        Raises:
            TransportError: network failure or any non-200 response.
        """
        url = self.dataset_url(config)
        resp = self._transport.fetch(url, basic_auth_header(credentials.username, credentials.password))
        if resp.status_code != 200:
            raise TransportError(
                f"Unhandled Marketplace API response {resp.status_code} for {url}",
                status_code=resp.status_code,
            )
        return resp.text

    def validate_credentials(self, username: str | None, password: str | None) -> bool:
        """Call ``GET vendors?forThisUser=true``; the API answers 200 only for valid credentials."""
        if not username or not password:
            return False
        try:
            resp = self._transport.fetch(
                self._config.validation_url, basic_auth_header(username, password)
            )
        except TransportError as exc:
            logger.warning("Credential validation request failed: {}", exc)
            return False
        return resp.status_code == 200
