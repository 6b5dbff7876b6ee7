"""
Logging setup.

Installs a console handler and, when a log file is configured, a rotating
file handler on the root logger.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from entitykit.config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5

# Marks handlers installed here so repeated calls do not stack them
_HANDLER_MARKER = "_entitykit_handler"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        settings: Settings to use (defaults to the process settings)

    Returns:
        The configured root logger
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)
        root_logger.info(f"Logging initialized: {log_path}")

    return root_logger
