"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str | None = Field(default=None, description="Optional log file path")


class CassandraConfig(BaseModel):
    """Cassandra cluster connection configuration model."""

    contact_points: list[str] = Field(
        default_factory=lambda: ["127.0.0.1"],
        description="Initial nodes used to discover the cluster",
    )
    port: int = Field(default=9042, description="Native protocol port")
    local_datacenter: str = Field(
        default="datacenter1", description="Datacenter considered local by the load balancer"
    )
    username: str | None = Field(default=None, description="Plain-text auth username")
    password: str | None = Field(default=None, description="Plain-text auth password")
    protocol_version: int | None = Field(
        default=None, description="Native protocol version (negotiated when unset)"
    )
    connect_timeout: float = Field(default=5.0, description="Connection timeout in seconds")
    request_timeout: float = Field(
        default=2.0, description="Request timeout of the default execution profile in seconds"
    )
    slow_request_timeout: float = Field(
        default=10.0, description="Request timeout of the 'slow' execution profile in seconds"
    )
    connection_name: str = Field(
        default="cql_examples", description="Name the session is registered under in cqlengine"
    )

    @field_validator("contact_points", mode="before")
    @classmethod
    def split_contact_points(cls, value):
        # Environment substitution yields "host1,host2"
        if isinstance(value, str):
            return [point.strip() for point in value.split(",") if point.strip()]
        return value

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and self.password is not None


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    replication_factor: int = Field(
        default=1, description="Replication factor of the example keyspaces (SimpleStrategy)"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(default_factory=AppConfig, description="Application configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    cassandra: CassandraConfig = Field(
        default_factory=CassandraConfig, description="Cassandra configuration"
    )
