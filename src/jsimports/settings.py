"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsimports.exceptions import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_EXTENSIONS = ".js,.jsx,.mjs,.cjs,.ts,.tsx,.mts,.cts"
DEFAULT_EXCLUDE_DIRS = "node_modules,.git"


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = Field(
        default="dev",
        validation_alias="APP_ENV",
        description="Application environment, e.g. 'dev', 'prod'.",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    source_extensions: str = Field(
        default=DEFAULT_SOURCE_EXTENSIONS,
        validation_alias="SOURCE_EXTENSIONS",
        description="Comma-separated file suffixes scanned when walking directories.",
    )
    source_encoding: str = Field(
        default="utf-8",
        validation_alias="SOURCE_ENCODING",
        description="Encoding used to decode source files.",
    )
    exclude_dirs: str = Field(
        default=DEFAULT_EXCLUDE_DIRS,
        validation_alias="EXCLUDE_DIRS",
        description="Comma-separated directory names skipped when walking directories.",
    )
    fail_fast: bool = Field(
        default=True,
        validation_alias="FAIL_FAST",
        description="Abort a scan on the first file that fails extraction.",
    )

    @field_validator("source_extensions")
    @classmethod
    def _normalize_extensions(cls, value: str) -> str:
        """Lower-case suffixes and make sure each starts with a dot."""
        suffixes = [entry.strip().lower() for entry in value.split(",") if entry.strip()]
        return ",".join(suffix if suffix.startswith(".") else f".{suffix}" for suffix in suffixes)

    @field_validator("exclude_dirs")
    @classmethod
    def _normalize_exclude_dirs(cls, value: str) -> str:
        """Drop blank entries from the excluded directory list."""
        return ",".join(entry.strip() for entry in value.split(",") if entry.strip())

    @property
    def extensions(self) -> tuple[str, ...]:
        """Return scanned file suffixes."""
        return tuple(self.source_extensions.split(",")) if self.source_extensions else ()

    @property
    def excluded_dirs(self) -> frozenset[str]:
        """Return directory names skipped while walking."""
        return frozenset(self.exclude_dirs.split(",")) if self.exclude_dirs else frozenset()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        if _is_missing_settings_error(exc):
            ensure_env_file_exists()
            try:
                return Settings()
            except Exception as retry_exc:
                raise SettingsError(exc=retry_exc) from retry_exc
        raise SettingsError(exc=exc) from exc


def ensure_env_file_exists(
    *,
    env_path: Path = Path(".env"),
    template_path: Path = Path(".env.template"),
) -> None:
    """Create `.env` from template when missing.

    Args:
        env_path (Path): Target environment file path.
        template_path (Path): Template file path.
    """
    if env_path.exists() or not template_path.exists():
        return
    env_path.write_text(template_path.read_text(encoding="utf-8"), encoding="utf-8")
    logger.info(
        "Created environment file from template",
        extra={"env_path": str(env_path), "template_path": str(template_path)},
    )


def _is_missing_settings_error(exc: Exception) -> bool:
    """Return whether the settings failure is due to missing values.

    Args:
        exc (Exception): Caught settings initialization error.

    Returns:
        bool: True when the error represents missing settings values.
    """
    if not isinstance(exc, ValidationError):
        return False
    return any(error.get("type") == "missing" for error in exc.errors())
