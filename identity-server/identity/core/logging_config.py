"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

from identity.core.config import Settings

_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "aiomysql", "uvicorn.access")


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
