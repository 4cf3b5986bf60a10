"""Logging configuration."""

import logging
import sys
from typing import Optional

from remitledger.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers and the level they are capped at
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    The level comes from settings.log_level unless given explicitly. The
    ledger package logs at that level; noisy third-party loggers are capped.
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("remitledger").setLevel(numeric_level)

    for name, cap in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(cap, numeric_level))
