"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cartesian import __version__


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_enabled: bool = True


class DisplaySettings(BaseSettings):
    """Command line output settings."""
    model_config = SettingsConfigDict(env_prefix="DISPLAY_")

    precision: int = Field(default=6, ge=1)
    colored: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "Cartesian"
    app_version: str = __version__
    debug: bool = False

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    def as_dict(self) -> dict[str, Any]:
        """Get the effective settings as a flat dictionary."""
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "debug": self.debug,
            "logging.level": self.logging.level,
            "logging.format": self.logging.format,
            "logging.console_enabled": self.logging.console_enabled,
            "display.precision": self.display.precision,
            "display.colored": self.display.colored,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
