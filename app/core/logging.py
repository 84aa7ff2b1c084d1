"""Logging configuration."""

import logging

from app.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure application logging.

    Falls back to ``settings.LOG_LEVEL`` when no explicit level is given.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
