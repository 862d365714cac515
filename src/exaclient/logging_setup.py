"""Logging configuration helper."""

from __future__ import annotations

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for command-line use.

    The library itself only creates module loggers; handlers are the
    application's business.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
