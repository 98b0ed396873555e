"""DynamoDB credential store implementing ICredentialStore."""

from __future__ import annotations

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from marketplace_connector.core.exceptions import CredentialStoreError
from marketplace_connector.models.connector import Credentials

CREDENTIALS_TABLE = "marketplace-connector-credentials"
CREDENTIALS_SK = "CREDENTIALS"


class DynamoDBCredentialStore:
    """Stores one username/password item per user.

    Key: ``PK = USER#{user_id}``, ``SK = CREDENTIALS``.
    """

    def __init__(self, user_id: str, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._user_id = user_id
        self._table_suffix = table_suffix
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    @property
    def table_name(self) -> str:
        return f"{CREDENTIALS_TABLE}{self._table_suffix}"

    def _table(self):
        return self._ddb.Table(self.table_name)

    def _key(self) -> dict[str, str]:
        return {"PK": f"USER#{self._user_id}", "SK": CREDENTIALS_SK}

    def get(self) -> Credentials | None:
        try:
            item = self._table().get_item(Key=self._key()).get("Item")
        except (BotoCoreError, ClientError) as exc:
            raise CredentialStoreError(f"DynamoDB read failed for user={self._user_id!r}: {exc}") from exc

        if not item:
            return None
        username = item.get("username")
        if not username:
            logger.info("Stored username is empty for user={}", self._user_id)
            return None
        password = item.get("password")
        if not password:
            logger.info("Stored password is empty for user={}", self._user_id)
            return None
        return Credentials(username=username, password=password)

    def set(self, credentials: Credentials) -> None:
        try:
            self._table().put_item(Item={
                **self._key(),
                "username": credentials.username,
                "password": credentials.password,
            })
        except (BotoCoreError, ClientError) as exc:
            raise CredentialStoreError(f"DynamoDB write failed for user={self._user_id!r}: {exc}") from exc

    def clear(self) -> None:
        try:
            self._table().delete_item(Key=self._key())
        except (BotoCoreError, ClientError) as exc:
            raise CredentialStoreError(f"DynamoDB delete failed for user={self._user_id!r}: {exc}") from exc
