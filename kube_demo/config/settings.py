"""Typed runtime settings with dotenv support and startup validation."""

from typing import Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENVIRONMENT_NAME = "development"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP listener and runtime metadata.

    Environment variable names are matched case-insensitively. The port and
    environment name accept the conventional container variables as aliases.
    Example: `application_port` reads from `PORT` or `APPLICATION_PORT`.

    Attributes:
        environment_name: Runtime environment label (`APP_ENV`, `NODE_ENV` or `ENVIRONMENT_NAME`).
        application_host: Host interface for web server binding.
        application_port: Web server port, `0` asks the OS for an ephemeral port.
        log_level: Root and uvicorn logging level.
        json_body_limit_bytes: Largest JSON request body accepted before answering 413.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(
        default=DEFAULT_ENVIRONMENT_NAME,
        validation_alias=AliasChoices("environment_name", "app_env", "node_env"),
    )
    application_host: str = Field(default="0.0.0.0", min_length=1)
    application_port: int = Field(
        default=3000,
        ge=0,
        le=65535,
        validation_alias=AliasChoices("application_port", "port"),
    )
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(default="info")
    json_body_limit_bytes: int = Field(default=100 * 1024, ge=0)

    @field_validator("environment_name")
    @classmethod
    def _validate_environment_name(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            return DEFAULT_ENVIRONMENT_NAME
        return stripped_value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
