"""Connector configuration, credentials and transport models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConnectorConfig(BaseModel):
    """User-provided configuration of one data source instance."""

    model_config = ConfigDict(populate_by_name=True)

    # Vendor-relative export endpoint, e.g. "reporting/licenses/export"
    dataset_api_path: str = Field(alias="datasetApiPath")
    vendor_id: str = Field(alias="vendorId")


class Credentials(BaseModel):
    """Marketplace username (email) and API token."""

    username: str
    password: str


class RequestedField(BaseModel):
    """A field the host asks for in a data request, by synthetic name."""

    name: str


class HttpResponse(BaseModel):
    """Status code and decoded body of a transport call."""

    status_code: int
    text: str = ""
