"""Request/response bodies of the reporting host's connector callbacks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from marketplace_connector.models.connector import ConnectorConfig, Credentials, RequestedField


class _HostModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GetSchemaRequest(_HostModel):
    config_params: ConnectorConfig = Field(alias="configParams")


class GetDataRequest(_HostModel):
    config_params: ConnectorConfig = Field(alias="configParams")
    fields: list[RequestedField] = Field(default_factory=list)


class SetCredentialsRequest(_HostModel):
    user_pass: Credentials = Field(alias="userPass")


class SetCredentialsResponse(_HostModel):
    error_code: str = Field(alias="errorCode")


class ConfigOption(BaseModel):
    label: str
    value: str


class ConfigEntry(_HostModel):
    type: str  # SELECT_SINGLE, TEXTINPUT
    id: str
    name: str
    help_text: str = Field(alias="helpText")
    options: list[ConfigOption] | None = None


class GetConfigResponse(_HostModel):
    config_params: list[ConfigEntry] = Field(alias="configParams")
    date_range_required: bool = Field(default=False, alias="dateRangeRequired")
