from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from platformdirs import user_config_dir

from qnotepad.domain.interfaces import IAppConfig
from qnotepad.utils.constants import (
    APP_CONFIG_DIR,
    CONFIG_FILE_NAME,
    DEFAULT_FILE_FILTER,
    DEFAULT_LOG_LEVEL,
    DIST_NAME,
)

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def user_config_path() -> Path:
    return Path(user_config_dir(APP_CONFIG_DIR)) / CONFIG_FILE_NAME


def installed_version() -> str:
    """Version of the installed distribution, "0.0.0" from an uninstalled checkout."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def _text(raw: str | None) -> str | None:
    return (raw or "").strip() or None


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Settings QNotepad reads from config.ini:

        [editor]  font_family, font_size, wrap
        [files]   filter
        [print]   printer_name
        [logging] level

    Missing or unparsable values keep the defaults below.
    """

    font_family: str | None = None
    font_size: int | None = None
    wrap: bool = True
    name_filter: str = DEFAULT_FILE_FILTER
    printer: str | None = None
    level: str = DEFAULT_LOG_LEVEL
    source: Path | None = None

    @classmethod
    def from_parser(
        cls, parser: configparser.ConfigParser, source: Path | None = None
    ) -> AppConfig:
        def raw(section: str, key: str) -> str | None:
            return parser.get(section, key, fallback=None)

        size = _parse_int(raw("editor", "font_size"))
        return cls(
            font_family=_text(raw("editor", "font_family")),
            font_size=size if size and size > 0 else None,
            wrap=_parse_bool(raw("editor", "wrap"), default=True),
            name_filter=_text(raw("files", "filter")) or DEFAULT_FILE_FILTER,
            printer=_text(raw("print", "printer_name")),
            level=(_text(raw("logging", "level")) or DEFAULT_LOG_LEVEL).upper(),
            source=source,
        )

    # ---- IAppConfig ----

    def editor_font(self) -> tuple[str | None, int | None]:
        return self.font_family, self.font_size

    def wrap_lines(self) -> bool:
        return self.wrap

    def file_filter(self) -> str:
        return self.name_filter

    def printer_name(self) -> str | None:
        return self.printer

    def log_level(self) -> str:
        return self.level


def load_app_config(explicit_ini: Path | None = None) -> AppConfig:
    """
    Settings from the first config file that exists and parses: the explicit
    path, then <user config dir>/QNotepad/config.ini. Defaults otherwise.
    """
    for path in (explicit_ini, user_config_path()):
        if path is None or not path.is_file():
            continue
        parser = configparser.ConfigParser(interpolation=None)
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, configparser.Error) as e:
            # Fall through to the next candidate.
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            continue
        return AppConfig.from_parser(parser, source=path)
    return AppConfig()
