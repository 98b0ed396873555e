"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from marketplace_connector.api.routes import connector, health
from marketplace_connector.connector.marketplace import MarketplaceClient
from marketplace_connector.connector.schema_cache import SchemaCache
from marketplace_connector.connector.service import DatasetAccessService
from marketplace_connector.connector.transport import RequestsHttpTransport
from marketplace_connector.core.config import AppSettings
from marketplace_connector.core.exceptions import UserFacingError
from marketplace_connector.core.logging import configure_logging
from marketplace_connector.core.protocols import IHttpTransport
from marketplace_connector.persistence import create_persistence


def build_service(settings: AppSettings, transport: IHttpTransport) -> DatasetAccessService:
    """Wire the dataset service from settings with production backends."""
    cache, credential_store = create_persistence(settings)
    return DatasetAccessService(
        client=MarketplaceClient(transport, settings.marketplace),
        credentials=credential_store,
        schema_cache=SchemaCache(cache, ttl=settings.cache.schema_ttl),
    )


async def user_error_handler(request: Request, exc: UserFacingError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(
    settings: AppSettings | None = None,
    service: DatasetAccessService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    An explicit ``service`` replaces the one built from settings.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)
        app.state.settings = app_settings
        if service is not None:
            app.state.service = service
            yield
            return

        transport = RequestsHttpTransport(timeout=app_settings.marketplace.timeout)
        app.state.service = build_service(app_settings, transport)
        try:
            yield
        finally:
            transport.close()

    app = FastAPI(
        title="Marketplace Reporting Connector",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(UserFacingError, user_error_handler)
    app.include_router(health.router)
    app.include_router(connector.router)
    return app
