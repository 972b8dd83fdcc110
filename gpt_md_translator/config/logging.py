"""Console logging for the translator CLI. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from gpt_md_translator.config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# HTTP client libraries log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3")


def configure_logging(settings: Settings) -> None:
    """Send all records at settings.log_level and above to stdout; unknown level names mean INFO."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(fields: dict[str, Any]) -> dict[str, Any]:
    """Keyword arguments attaching structured fields to a record: logger.info(msg, **log_extra({...}))."""
    return {"extra": fields}
