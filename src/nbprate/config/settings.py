# src/nbprate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local ``.env`` file) with
validation; every field has a default so a bare invocation works.

Files that USE this module:
- nbprate.app (loads settings for the run)
- nbprate.adapters.nbp.fetcher (base URL, charset, timeouts)
- nbprate.adapters.nbp.locator (table type)

Files that this module USES:
- None
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import codecs  # Charset name validation
import logging  # Level name validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, ValidationError, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from nbprate.domain.errors import InitializationError

DEFAULT_BASE_URL = "http://www.nbp.pl/kursy/xml/"
DEFAULT_TABLE_TYPE = "c"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- NBP remote folder ---
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="NBP_BASE_URL")
    table_type: str = Field(default=DEFAULT_TABLE_TYPE, alias="NBP_TABLE_TYPE", min_length=1)
    index_charset: str = Field(default="utf-8", alias="NBP_INDEX_CHARSET")

    # --- HTTP Settings (milliseconds, 0 = no timeout) ---
    connect_timeout_ms: int = Field(default=1000, alias="NBP_CONNECT_TIMEOUT_MS", ge=0)
    read_timeout_ms: int = Field(default=1000, alias="NBP_READ_TIMEOUT_MS", ge=0)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_console: bool = Field(default=True, alias="NBPRATE_LOG_CONSOLE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and make sure it ends with a slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("NBP_BASE_URL must be an http(s) URL")
        return v if v.endswith("/") else v + "/"

    @field_validator("index_charset")
    @classmethod
    def validate_charset(cls, v: str) -> str:
        """Reject charset names Python cannot decode with."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown charset: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names only."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @property
    def timeout(self) -> tuple[Optional[float], Optional[float]]:
        """(connect, read) timeout in seconds as expected by requests."""
        return (_ms_to_seconds(self.connect_timeout_ms), _ms_to_seconds(self.read_timeout_ms))


def _ms_to_seconds(ms: int) -> Optional[float]:
    return ms / 1000 if ms else None


def load_settings(**overrides) -> Settings:
    """
    Build a Settings instance.

    Raises:
        InitializationError: If the environment holds invalid values
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise InitializationError(f"Invalid configuration: {e}") from e
