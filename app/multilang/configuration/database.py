"""Durable text store settings."""

from typing import Optional

from pydantic import Field, field_validator

from multilang.configuration.base import SectionSettings

DB_CONNECTIONS = ("default", "memory", "dynamodb")


class DatabaseSettings(SectionSettings):
    """Durable store configuration.

    Environment Variables:
        TEXTS_DB_CONNECTION: Store backend name: default, memory or dynamodb (default: default)
        TEXTS_DB_TABLE: Name of the texts table, also the cache name prefix (default: texts)
        TEXTS_DB_AUTOSAVE: Whether missing keys may be persisted (default: True)
        AWS_REGION: AWS region of the DynamoDB table (default: ca-central-1)
        DYNAMODB_ENDPOINT_URL: Optional endpoint override, e.g. DynamoDB Local
    """

    connection: str = Field(default="default", alias="TEXTS_DB_CONNECTION")
    texts_table: str = Field(default="texts", alias="TEXTS_DB_TABLE", min_length=1)
    autosave: bool = Field(default=True, alias="TEXTS_DB_AUTOSAVE")
    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    DYNAMODB_ENDPOINT_URL: Optional[str] = Field(
        default=None, alias="DYNAMODB_ENDPOINT_URL"
    )

    @field_validator("connection")
    @classmethod
    def validate_connection(cls, v: str) -> str:
        """Validate the store connection name."""
        v = v.strip().lower()
        if v not in DB_CONNECTIONS:
            raise ValueError(f"Unsupported texts connection: {v}")
        return v
