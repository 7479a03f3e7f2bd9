import logging
from typing import Optional

from pydantic import Field, field_validator

from .base import GridBaseSettings
from .query import QuerySettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GridSettings(GridBaseSettings):

    default_driver: Optional[str] = Field(
        default=None,
        description="Driver used when a builder is constructed without an explicit driver or "
                   "grammar (e.g., mysql, mariadb, pgsql, or any registered custom driver)"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level applied by setup_logging() when configured from settings"
    )
    query: QuerySettings = Field(
        default_factory=QuerySettings,
        description="Query assembly behaviour (date formats, search, boolean tags)"
    )

    @field_validator('default_driver')
    @classmethod
    def normalize_driver(cls, v: Optional[str]) -> Optional[str]:
        """Driver names are matched case-insensitively; blank means unset."""
        if v is None or not v.strip():
            return None
        return v.strip().lower()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is a standard logging level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Use one of {', '.join(_LOG_LEVELS)}")
        return level


# Singleton instance
_settings: Optional[GridSettings] = None


def get_settings(force_reload: bool = False) -> GridSettings:
    """Get the singleton settings instance for the application.

    Settings are read from ``GRIDSQL_*`` environment variables on first
    access and reused afterwards.

    Args:
        force_reload: If True, creates a new settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        GridSettings: The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = GridSettings()
        logging.getLogger(__name__).debug(
            f"Loaded settings (default_driver={_settings.default_driver}, "
            f"strict_date_formats={_settings.query.strict_date_formats})"
        )

    return _settings


def _reload_settings() -> GridSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh GridSettings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
