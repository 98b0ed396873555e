"""Connector exception hierarchy."""

from __future__ import annotations

from loguru import logger


class ConnectorError(Exception):
    """Base exception for all connector errors."""


class MissingCredentialsError(ConnectorError):
    """No username/password stored for the current user."""


class TransportError(ConnectorError):
    """Marketplace API call failed or returned a non-200 response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class CsvParseError(ConnectorError):
    """Response body could not be split into rows and columns."""


class SchemaUnavailableError(ConnectorError):
    """No cached schema and no usable table to infer one from."""


class SchemaMismatchError(ConnectorError):
    """A requested field or label does not exist in the dataset."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Field {field!r} is not part of the dataset schema")


class CacheError(ConnectorError):
    """Cache backend operation failed."""


class CredentialStoreError(ConnectorError):
    """Credential store backend operation failed."""


class UserFacingError(ConnectorError):
    """Terminal error shown to the reporting host user. Aborts the current operation."""


def user_error(message: str, **context: object) -> UserFacingError:
    """Log ``message`` with its context and return it as a :class:`UserFacingError` to raise."""
    logger.bind(**context).error(message)
    return UserFacingError(message)
