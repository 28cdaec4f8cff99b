"""Logging setup shared by the API and scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the ``benefitwise`` logger.

    Records stop at this logger so a server's root handler does not print them twice.
    """
    logger = logging.getLogger("benefitwise")
    logger.setLevel(level.upper())
    logger.propagate = False
    if not any(getattr(h, "_benefitwise", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._benefitwise = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
