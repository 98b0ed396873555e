"""Dataset access service: cache-or-fetch schema resolution and projected data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from loguru import logger

from marketplace_connector.connector.csv_source import Table, parse_table
from marketplace_connector.connector.marketplace import MarketplaceClient
from marketplace_connector.connector.projection import project, select_fields
from marketplace_connector.connector.schema_cache import SchemaCache, schema_cache_key
from marketplace_connector.connector.schema_inference import infer_schema
from marketplace_connector.core.exceptions import (
    CredentialStoreError,
    CsvParseError,
    MissingCredentialsError,
    SchemaMismatchError,
    SchemaUnavailableError,
    TransportError,
    user_error,
)
from marketplace_connector.core.protocols import ICredentialStore
from marketplace_connector.models.connector import ConnectorConfig, Credentials, RequestedField
from marketplace_connector.models.schema import FieldSchema, GetDataResponse

AuthErrorCode = Literal["NONE", "INVALID_CREDENTIALS"]


class DatasetAccessService:
    """Entry point for the reporting host's schema, data and auth callbacks.

    All collaborators are injected; every unrecoverable condition surfaces as
    a single UserFacingError.
    """

    def __init__(
        self,
        *,
        client: MarketplaceClient,
        credentials: ICredentialStore,
        schema_cache: SchemaCache,
    ) -> None:
        self._client = client
        self._credentials = credentials
        self._schema_cache = schema_cache

    # ---- data path ----

    def _stored_credentials(self) -> Credentials | None:
        try:
            return self._credentials.get()
        except CredentialStoreError as exc:
            logger.warning("Credential store read failed: {}", exc)
            return None

    def _require_credentials(self) -> Credentials:
        credentials = self._stored_credentials()
        if credentials is None:
            raise MissingCredentialsError("Could not retrieve stored credentials")
        return credentials

    def fetch_table(self, config: ConnectorConfig) -> Table:
        """Fetch and parse the CSV export for ``config``. Row data is never cached."""
        try:
            credentials = self._require_credentials()
        except MissingCredentialsError as exc:
            raise user_error(str(exc), dataset_api_path=config.dataset_api_path) from exc

        try:
            text = self._client.fetch_csv(config, credentials)
        except TransportError as exc:
            raise user_error(
                f"Failed to fetch CSV data for {config.dataset_api_path}: {exc}",
                dataset_api_path=config.dataset_api_path,
                status_code=exc.status_code,
            ) from exc

        try:
            return parse_table(text)
        except CsvParseError as exc:
            raise user_error(
                f"Unexpected CSV parsing exception for {config.dataset_api_path}: {exc}",
                dataset_api_path=config.dataset_api_path,
            ) from exc

    def get_schema(self, config: ConnectorConfig, prefetched: Table | None = None) -> list[FieldSchema]:
        """Cached schema for the dataset, else infer it from ``prefetched`` or a fresh fetch."""
        cache_key = schema_cache_key(config.dataset_api_path)
        cached = self._schema_cache.get(cache_key)
        if cached is not None:
            logger.debug("Schema cache hit for {}", cache_key)
            return cached

        table = prefetched if prefetched is not None else self.fetch_table(config)
        try:
            schema = infer_schema(table)
        except SchemaUnavailableError as exc:
            raise user_error(
                f"Unable to retrieve schema for {config.dataset_api_path}: {exc}",
                dataset_api_path=config.dataset_api_path,
                has_prefetched_data=prefetched is not None,
            ) from exc

        self._schema_cache.put(cache_key, schema)
        return schema

    def get_data(
        self,
        config: ConnectorConfig,
        requested_fields: Sequence[RequestedField | str],
    ) -> GetDataResponse:
        """Fresh rows restricted to ``requested_fields``, in the order requested."""
        table = self.fetch_table(config)
        schema = self.get_schema(config, prefetched=table)
        names = [f if isinstance(f, str) else f.name for f in requested_fields]
        try:
            requested_schema = select_fields(schema, names)
            rows = project(table, requested_schema)
        except SchemaMismatchError as exc:
            raise user_error(
                f"Schema mismatch for {config.dataset_api_path}: {exc}",
                dataset_api_path=config.dataset_api_path,
                field=exc.field,
            ) from exc
        return GetDataResponse(schema=requested_schema, rows=rows)

    # ---- auth ----

    def is_auth_valid(self) -> bool:
        credentials = self._stored_credentials()
        if credentials is None:
            return False
        return self._client.validate_credentials(credentials.username, credentials.password)

    def set_credentials(self, credentials: Credentials) -> AuthErrorCode:
        """Store ``credentials`` only if the Marketplace API accepts them."""
        if not self._client.validate_credentials(credentials.username, credentials.password):
            return "INVALID_CREDENTIALS"
        try:
            self._credentials.set(credentials)
        except CredentialStoreError as exc:
            raise user_error(f"Failed to store credentials: {exc}") from exc
        return "NONE"

    def reset_auth(self) -> None:
        try:
            self._credentials.clear()
        except CredentialStoreError as exc:
            raise user_error(f"Failed to reset stored credentials: {exc}") from exc
