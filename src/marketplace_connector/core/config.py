"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class MarketplaceConfig(BaseSettings):
    """Atlassian Marketplace REST API configuration."""

    model_config = {"env_prefix": "MPC_MARKETPLACE_"}

    base_url: str = "https://marketplace.atlassian.com"
    api_path: str = "/rest/2"
    timeout: int = 30

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.api_path}"

    def vendor_url(self, vendor_id: str) -> str:
        return f"{self.api_base_url}/vendors/{vendor_id}"

    def dataset_url(self, vendor_id: str, dataset_api_path: str) -> str:
        """Export endpoint for a vendor-relative dataset path, always as CSV."""
        return f"{self.vendor_url(vendor_id)}/{dataset_api_path.lstrip('/')}?accept=csv"

    @property
    def validation_url(self) -> str:
        return f"{self.api_base_url}/vendors?forThisUser=true"


class CacheConfig(BaseSettings):
    """Schema cache configuration."""

    model_config = {"env_prefix": "MPC_CACHE_"}

    backend: Literal["memory", "redis"] = "memory"
    schema_ttl: int = 21600  # 6 hours


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "MPC_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "mpc:"
    socket_timeout: float = 2.0


class CredentialsConfig(BaseSettings):
    """Credential store configuration."""

    model_config = {"env_prefix": "MPC_CREDENTIALS_"}

    backend: Literal["memory", "dynamodb"] = "memory"
    user_id: str = "default"


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration for the credential store."""

    model_config = {"env_prefix": "MPC_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "MPC_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    marketplace: MarketplaceConfig = MarketplaceConfig()
    cache: CacheConfig = CacheConfig()
    redis: RedisConfig = RedisConfig()
    credentials: CredentialsConfig = CredentialsConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
