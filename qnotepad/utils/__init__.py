"""App constants and utilities."""

from .constants import (
    APP_CONFIG_DIR,
    APP_NAME,
    APP_ORG,
    DEFAULT_FILE_FILTER,
    DEFAULT_LOG_LEVEL,
    MSG_CANNOT_OPEN,
    MSG_CANNOT_PRINT,
    MSG_CANNOT_SAVE,
    OPEN_CAPTION,
    SAVE_AS_CAPTION,
    WARNING_TITLE,
)
from .log import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "APP_CONFIG_DIR",
    "WARNING_TITLE",
    "OPEN_CAPTION",
    "SAVE_AS_CAPTION",
    "MSG_CANNOT_OPEN",
    "MSG_CANNOT_SAVE",
    "MSG_CANNOT_PRINT",
    "DEFAULT_FILE_FILTER",
    "DEFAULT_LOG_LEVEL",
    "configure_logging",
]
