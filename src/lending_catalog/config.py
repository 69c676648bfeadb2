"""Configuration management for the Lending Catalog.

Settings are read from the environment (prefix ``LENDING_CATALOG_``) and an
optional ``.env`` file, and validated with Pydantic v2. Logging is set up from
the same settings.
"""

import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CatalogConfig(BaseSettings):
    """Runtime settings for a lending desk."""

    model_config = SettingsConfigDict(
        # Use LENDING_CATALOG_ prefix for all env vars
        env_prefix="LENDING_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    catalog_name: str = Field(
        default="lending-catalog",
        description="Name of the catalog, used in log messages",
        pattern=r"^[a-z0-9-]+$",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging of every catalog move",
    )

    load_sample_data: bool = Field(
        default=True,
        description="Seed the sample patrons and books when building a desk",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("catalog_name")
    @classmethod
    def validate_catalog_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Catalog name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Catalog name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        """True when debug output is wanted."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the process-wide configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Drop the cached configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]


def configure_logging(config: CatalogConfig | None = None) -> None:
    """
    Configure root logging on stderr from the catalog settings.

    stdout is left to whatever front end renders outcomes.
    """
    config = config or get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s", config.catalog_name, config.log_level
    )
