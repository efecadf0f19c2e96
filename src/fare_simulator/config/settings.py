"""Runtime settings for the HTTP service, read from ``FARE_SIM_*`` env vars."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Service configuration.  Pricing constants are not configurable."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    environment: str = Field(default="development", description="Deployment name, tagged on JSON logs")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    model_config = SettingsConfigDict(env_prefix="FARE_SIM_", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
