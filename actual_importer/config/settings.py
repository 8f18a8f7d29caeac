"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and Actual ledger connectivity.

    Environment variable names map directly to field names in uppercase.
    Example: `actual_server_url` reads from `ACTUAL_SERVER_URL`.

    Attributes:
        environment_name: Runtime environment label.
        app_host: Host interface for web server binding.
        app_port: Web server port.
        actual_server_url: Fallback Actual API base URL when a request omits one.
        actual_password: Fallback Actual API password when a request omits one.
        actual_budget_id: Fallback Actual budget identifier when a request omits one.
        mock_actual: Serve fixed accounts/budgets and accept imports without network calls.
        actual_request_timeout_seconds: Per-call HTTP deadline for Actual API requests.
        import_preview_sample_size: Number of transactions returned per group preview.
        log_level: Logging level name for the `actual_importer` namespace.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=3000, ge=1, le=65535)
    actual_server_url: str = Field(default="")
    actual_password: str = Field(default="")
    actual_budget_id: str = Field(default="")
    mock_actual: bool = Field(default=False)
    actual_request_timeout_seconds: float = Field(default=30.0, gt=0)
    import_preview_sample_size: int = Field(default=5, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("actual_server_url", "actual_budget_id")
    @classmethod
    def _validate_stripped_string(cls, value: str) -> str:
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unsupported log_level={value}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
