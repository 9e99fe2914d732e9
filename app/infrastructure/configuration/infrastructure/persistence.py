"""Mapping store infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

MAPPING_STORE_BACKENDS = ("memory", "dynamodb")


class MappingStoreSettings(InfrastructureSettings):
    """Identity mapping store configuration.

    Environment Variables:
        MAPPING_STORE_BACKEND: Backend type, 'memory' or 'dynamodb' (default: memory)
        MAPPING_TABLE_NAME: DynamoDB table holding the mapping entries
        AWS_REGION: AWS region of the table (default: ca-central-1)
        DYNAMODB_ENDPOINT_URL: Optional endpoint override (local DynamoDB)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.mapping_store.backend == "dynamodb":
            table = settings.mapping_store.table_name
        ```
    """

    backend: str = Field(
        default="memory",
        alias="MAPPING_STORE_BACKEND",
        description="Mapping store backend: 'memory' or 'dynamodb'",
    )
    table_name: str = Field(
        default="membership_relay_mapping",
        alias="MAPPING_TABLE_NAME",
        description="DynamoDB table name for the identity mapping",
    )
    aws_region: str = Field(default="ca-central-1", alias="AWS_REGION")
    endpoint_url: str | None = Field(default=None, alias="DYNAMODB_ENDPOINT_URL")

    @field_validator("backend", mode="before")
    @classmethod
    def _validate_backend(cls, v: str) -> str:
        """Normalize and validate MAPPING_STORE_BACKEND."""
        value = (v or "memory").strip().lower()
        if value not in MAPPING_STORE_BACKENDS:
            raise ValueError(
                f"Invalid MAPPING_STORE_BACKEND: {v!r} "
                f"(expected one of {', '.join(MAPPING_STORE_BACKENDS)})"
            )
        return value
