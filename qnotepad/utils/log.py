from __future__ import annotations

import logging

from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """
    Configure the root logger once for the desktop app.

    Unknown level names fall back to WARNING rather than failing startup.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    else:
        resolved = level
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
