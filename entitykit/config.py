"""
Runtime Configuration

Settings are read from environment variables once and cached.

Variables:
- ENTITYKIT_DATABASE_URL: SQLAlchemy URL of the store
- ENTITYKIT_SQL_ECHO: log emitted SQL (true/false)
- ENTITYKIT_LOG_LEVEL: root log level name
- ENTITYKIT_LOG_FILE: optional path of a rotating log file
"""
import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./entitykit.db"
DEFAULT_LOG_LEVEL = "INFO"


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean environment variable.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        log_level = os.environ.get('ENTITYKIT_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(f"Unknown log level '{log_level}', falling back to {DEFAULT_LOG_LEVEL}")
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            database_url=os.environ.get('ENTITYKIT_DATABASE_URL', DEFAULT_DATABASE_URL),
            sql_echo=env_flag('ENTITYKIT_SQL_ECHO'),
            log_level=log_level,
            log_file=os.environ.get('ENTITYKIT_LOG_FILE') or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read on first use."""
    return Settings.from_env()
