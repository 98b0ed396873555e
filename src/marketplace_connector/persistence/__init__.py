"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from marketplace_connector.core.config import AppSettings
from marketplace_connector.core.protocols import ICacheBackend, ICredentialStore
from marketplace_connector.persistence.dynamodb_backend import DynamoDBCredentialStore
from marketplace_connector.persistence.memory_backend import (
    MemoryCacheBackend,
    MemoryCredentialStore,
)
from marketplace_connector.persistence.redis_backend import RedisCacheBackend


def create_persistence(
    settings: AppSettings | None = None,
) -> tuple[ICacheBackend, ICredentialStore]:
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (cache, credential_store).
    """
    if settings is None:
        settings = AppSettings()

    cache: ICacheBackend
    if settings.cache.backend == "redis":
        cache = RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
            socket_timeout=settings.redis.socket_timeout,
        )
    else:
        cache = MemoryCacheBackend()

    credential_store: ICredentialStore
    if settings.credentials.backend == "dynamodb":
        credential_store = DynamoDBCredentialStore(
            user_id=settings.credentials.user_id,
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )
    else:
        credential_store = MemoryCredentialStore()

    return cache, credential_store
