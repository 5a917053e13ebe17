"""Pydantic settings models for application configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.exceptions import MissingCredentialError
from src.domain.models.index import DEFAULT_INDEX_MODELS, IndexModelSpec

API_KEY_ENV_VAR = "TWELVELABS_API_KEY"
DEFAULT_BASE_URL = "https://api.twelvelabs.io/v1.3"


class AppSettings(BaseModel):
    """Application-level settings."""

    name: str = "twelvelabs-video-server"
    version: str = "1.0.0"
    environment: Literal["dev", "staging", "prod"] = "dev"


class TwelveLabsSettings(BaseModel):
    """Upstream video API settings.

    Immutable once loaded; the same instance is handed to the HTTP client
    and every tool handler for the lifetime of the process.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout; None leaves requests unbounded",
    )
    index_models: tuple[IndexModelSpec, ...] = Field(
        default=DEFAULT_INDEX_MODELS,
        min_length=1,
    )
    index_addons: tuple[str, ...] = ("thumbnail",)


class TelemetrySettings(BaseModel):
    """Diagnostic logging settings."""

    enabled: bool = True
    log_format: Literal["json", "text"] = "json"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Settings(BaseSettings):
    """Root settings container with environment loading."""

    app: AppSettings = Field(default_factory=AppSettings)
    twelvelabs: TwelveLabsSettings = Field(default_factory=TwelveLabsSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TWELVELABS_MCP__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def require_api_key(self) -> str:
        """Return the configured API key.

        Raises:
            MissingCredentialError: If no key was configured.
        """
        if not self.twelvelabs.api_key:
            raise MissingCredentialError(API_KEY_ENV_VAR)
        return self.twelvelabs.api_key
