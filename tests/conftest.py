"""Shared fixtures: a wired DatasetAccessService over in-memory fakes."""

from __future__ import annotations

import pytest

from marketplace_connector.connector.marketplace import MarketplaceClient
from marketplace_connector.connector.schema_cache import SchemaCache
from marketplace_connector.connector.service import DatasetAccessService
from marketplace_connector.core.config import MarketplaceConfig
from marketplace_connector.models.connector import ConnectorConfig, Credentials, HttpResponse

from tests.fakes import (
    API_URL,
    BASE_URL,
    LICENSES_CSV,
    FakeTransport,
    MemoryCacheBackend,
    MemoryCredentialStore,
)


@pytest.fixture
def marketplace_config():
    return MarketplaceConfig(base_url=BASE_URL)


@pytest.fixture
def connector_config():
    return ConnectorConfig(dataset_api_path="reporting/licenses/export", vendor_id="1234")


@pytest.fixture
def transport():
    t = FakeTransport()
    t.set_response(f"{API_URL}/vendors/1234/reporting/licenses/export", HttpResponse(status_code=200, text=LICENSES_CSV))
    t.set_response(f"{API_URL}/vendors?forThisUser=true", HttpResponse(status_code=200, text="{}"))
    return t


@pytest.fixture
def cache_backend():
    return MemoryCacheBackend()


@pytest.fixture
def credential_store():
    return MemoryCredentialStore(Credentials(username="vendor@example.com", password="token"))


@pytest.fixture
def service(transport, marketplace_config, credential_store, cache_backend):
    return DatasetAccessService(
        client=MarketplaceClient(transport, marketplace_config),
        credentials=credential_store,
        schema_cache=SchemaCache(cache_backend, ttl=300),
    )
