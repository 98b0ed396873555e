"""Connector callback endpoints invoked by the reporting host."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from marketplace_connector.connector.service import DatasetAccessService
from marketplace_connector.models.host import (
    ConfigEntry,
    ConfigOption,
    GetConfigResponse,
    GetDataRequest,
    GetSchemaRequest,
    SetCredentialsRequest,
    SetCredentialsResponse,
)
from marketplace_connector.models.schema import GetSchemaResponse

router = APIRouter(tags=["connector"])

DATASET_OPTIONS: list[ConfigOption] = [
    ConfigOption(label="Feedback", value="reporting/feedback/details/export"),
    ConfigOption(label="Licenses", value="reporting/licenses/export"),
    ConfigOption(label="Transactions", value="reporting/sales/transactions/export"),
    ConfigOption(label="Churn events", value="reporting/sales/metrics/churn/details/export"),
    ConfigOption(label="Conversion events", value="reporting/sales/metrics/conversion/details/export"),
    ConfigOption(label="Renewal events", value="reporting/sales/metrics/renewal/details/export"),
]


def get_service(request: Request) -> DatasetAccessService:
    return request.app.state.service


@router.get("/auth-type")
async def get_auth_type() -> dict[str, str]:
    return {"type": "USER_PASS"}


@router.get("/config")
async def get_config() -> dict:
    """User-facing configuration: dataset selection and vendor id."""
    config = GetConfigResponse(
        config_params=[
            ConfigEntry(
                type="SELECT_SINGLE",
                id="datasetApiPath",
                name="Dataset",
                help_text="Select any of the available Marketplace datasets",
                options=DATASET_OPTIONS,
            ),
            ConfigEntry(
                type="TEXTINPUT",
                id="vendorId",
                name="Vendor ID",
                help_text="Enter the unique identifier for your vendor account, e.g. 1234567",
            ),
        ],
        date_range_required=False,
    )
    return config.model_dump(by_alias=True, exclude_none=True)


@router.post("/schema")
def get_schema(body: GetSchemaRequest, service: DatasetAccessService = Depends(get_service)) -> dict:
    return GetSchemaResponse(schema=service.get_schema(body.config_params)).to_host()


@router.post("/data")
def get_data(body: GetDataRequest, service: DatasetAccessService = Depends(get_service)) -> dict:
    return service.get_data(body.config_params, body.fields).to_host()


@router.get("/auth/valid")
def is_auth_valid(service: DatasetAccessService = Depends(get_service)) -> dict[str, bool]:
    return {"valid": service.is_auth_valid()}


@router.post("/auth/credentials")
def set_credentials(
    body: SetCredentialsRequest, service: DatasetAccessService = Depends(get_service)
) -> dict[str, str]:
    code = service.set_credentials(body.user_pass)
    return SetCredentialsResponse(error_code=code).model_dump(by_alias=True)


@router.delete("/auth")
def reset_auth(service: DatasetAccessService = Depends(get_service)) -> dict[str, str]:
    service.reset_auth()
    return {"status": "reset"}


@router.get("/admin-user")
async def is_admin_user() -> dict[str, bool]:
    return {"admin": True}
