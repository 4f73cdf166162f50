"""Logging initialisation for the CLI."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    if getattr(setup_logging, "_configured", False):
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(handler)

    setup_logging._configured = True  # type: ignore[attr-defined]
