"""Application configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from enumerations.catalogs.log_level import LogLevelID


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_reload: bool = Field(default=False, description="Enable auto-reload")

    # Logging Configuration
    log_level: LogLevelID = Field(
        default=LogLevelID("INFO"),
        description="Logging level (any LogLevel id, case-insensitive)",
    )
    log_dir: str = Field(default="logs", description="Directory for log files")
    log_retention_days: int = Field(
        default=30, ge=1, description="Days to keep rotated log files"
    )

    # Validation Configuration
    log_invalid_captures: bool = Field(
        default=True,
        description="Log a warning for each unrecognized value captured during validation",
    )

    @property
    def loguru_level(self) -> str:
        """Get the loguru level name for the configured log level."""
        item = self.log_level.item()
        if item is None:
            raise ValueError(f"Unknown log level: {self.log_level}")
        return item.loguru_level


# Global settings instance
settings = Settings()
