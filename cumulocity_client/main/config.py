"""
Client Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cumulocity_client.shared import EnumEnvironment, EnumLogLevel
from cumulocity_client.shared.env import load_secret_file_variables


class CumulocitySettings(BaseSettings):
    """Connection settings of the Cumulocity tenant."""

    base_url: str = Field(
        default="http://localhost:8111", description="Base URL of the tenant"
    )
    tenant: Optional[str] = Field(
        default=None, description="Tenant id, prefixed to the username"
    )
    username: Optional[str] = Field(default=None, description="Platform user")
    password: Optional[str] = Field(default=None, description="Platform password")
    timeout: float = Field(
        default=30.0, gt=0, description="Default request timeout in seconds"
    )
    verify_ssl: bool = Field(
        default=True, description="Verify the server TLS certificate"
    )
    max_connections: int = Field(
        default=100, ge=1, description="Maximum pooled HTTP connections"
    )

    model_config = SettingsConfigDict(
        env_prefix="C8Y_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main client settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Client environment"
    )

    c8y: CumulocitySettings = Field(default_factory=CumulocitySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get client settings instance Factory.

    Resolves ``C8Y_*_FILE`` secrets first, so a mounted password file
    behaves like ``C8Y_PASSWORD``. Mocked in tests.
    """
    load_secret_file_variables("C8Y_")
    return AppSettings()
