"""Fail-open schema cache on top of an ICacheBackend."""

from __future__ import annotations

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from marketplace_connector.core.exceptions import CacheError
from marketplace_connector.core.protocols import ICacheBackend
from marketplace_connector.models.schema import FieldSchema

_SCHEMA_LIST = TypeAdapter(list[FieldSchema])

KEY_PREFIX = "schema--"
PATH_SEPARATOR = "/"
SEPARATOR_TOKEN = "--"


def schema_cache_key(dataset_api_path: str) -> str:
    """Cache key for a dataset path: ``reporting/licenses/export`` -> ``schema--reporting--licenses--export``.

    Hyphens already in the path are escaped as ``-.`` first, so two distinct
    paths never map to the same key.
    """
    escaped = dataset_api_path.replace("-", "-.")
    return KEY_PREFIX + escaped.replace(PATH_SEPARATOR, SEPARATOR_TOKEN)


class SchemaCache:
    """Stores inferred schemas per dataset path.

    Backend failures never reach the caller: reads degrade to a miss and
    writes are logged and dropped.
    """

    def __init__(self, backend: ICacheBackend | None, ttl: int = 21600) -> None:
        self._backend = backend
        self._ttl = ttl

    def get(self, key: str) -> list[FieldSchema] | None:
        if self._backend is None:
            logger.debug("No cache backend configured, treating {} as miss", key)
            return None
        try:
            raw = self._backend.get(key)
        except CacheError as exc:
            logger.warning("Schema cache read failed for {}: {}", key, exc)
            return None
        if raw is None:
            return None
        try:
            return _SCHEMA_LIST.validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding unreadable cached schema for {}: {}", key, exc)
            return None

    def put(self, key: str, schema: list[FieldSchema]) -> None:
        if self._backend is None:
            logger.info("Failed to cache schema because no cache backend is configured")
            return
        payload = _SCHEMA_LIST.dump_json(schema, by_alias=True, exclude_none=True).decode()
        try:
            self._backend.setex(key, self._ttl, payload)
        except CacheError as exc:
            logger.warning("Schema cache write failed for {}: {}", key, exc)
