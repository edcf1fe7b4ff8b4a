"""
Logging configuration for the Our Impact API.

Everything goes to stdout and to `<LOG_DIR>/our_impact_api.log`; errors
are also copied to `<LOG_DIR>/our_impact_api_errors.log`. Both files
rotate at 10 MB.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ourimpact.config import settings

LOG_FILE = "our_impact_api.log"
ERROR_LOG_FILE = "our_impact_api_errors.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Chatty third-party loggers, kept at WARNING
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiohttp.access")


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> logging.Logger:
    """
    Configure the root logger.

    Safe to call more than once: existing root handlers are replaced.
    DEBUG switches to a format that includes function and line number.
    """
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt=DEBUG_FORMAT if settings.DEBUG else DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    console.setFormatter(formatter)
    root.addHandler(console)

    root.addHandler(_rotating_handler(log_dir / LOG_FILE, logging.INFO, formatter))
    root.addHandler(_rotating_handler(log_dir / ERROR_LOG_FILE, logging.ERROR, formatter))

    # Request lines come from our own middleware
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info("=" * 60)
    root.info(f"{settings.PROJECT_NAME} - Logging initialized")
    root.info(f"Log Level: {settings.LOG_LEVEL} | Debug Mode: {settings.DEBUG} | Log Dir: {log_dir}")
    root.info("=" * 60)

    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger; call with `__name__`."""
    return logging.getLogger(name)
