"""Logging setup for the wedding API and CLI.

Everything goes to stdout. When ``LOG_PATH`` is set the same records are
also written to a rotating file (10MB, five backups).
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from wedding.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that are too chatty at INFO for request-level logs
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
}


def _file_handler(path: str, formatter: logging.Formatter) -> RotatingFileHandler:
    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
    handler.setFormatter(formatter)
    return handler


def setup_logging():
    """Configure root logging from settings."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if settings.log_path:
        handlers.append(_file_handler(settings.log_path, formatter))

    for handler in handlers:
        handler.setLevel(log_level)

    logging.basicConfig(level=log_level, handlers=handlers)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger("wedding").debug(
        f"Logging configured (env={settings.env}, level={settings.log_level})"
    )
