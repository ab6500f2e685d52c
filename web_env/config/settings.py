"""Typed runtime settings with startup validation.

The service reports the environment it runs in, so its own settings live under
the `WEB_ENV_` prefix and every field has a default. With nothing set the
service listens on `0.0.0.0:3000`.
"""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP runtime.

    Environment variable names are the uppercase field names with the
    `WEB_ENV_` prefix. Example: `application_port` reads from
    `WEB_ENV_APPLICATION_PORT`.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Standard library logging level name.
        publish_to_process_environment: Write `HOSTNAME` and `LOCAL_IP` into the
            process environment on each page capture instead of only into the
            per-request snapshot.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEB_ENV_",
        extra="ignore",
        case_sensitive=False,
    )

    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    publish_to_process_environment: bool = Field(default=False)

    @field_validator("application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unsupported log level {value!r}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from the environment.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update WEB_ENV_* environment variables. Details: {error}"
        ) from error
