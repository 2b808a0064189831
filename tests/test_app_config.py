# tests/test_app_config.py
from __future__ import annotations

import configparser
from importlib.metadata import PackageNotFoundError
from pathlib import Path

import pytest

import qnotepad.services.config.app_config as cfg_mod
from qnotepad.services.config.app_config import (
    AppConfig,
    installed_version,
    load_app_config,
    user_config_path,
)


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture()
def user_dir(monkeypatch, tmp_path: Path) -> Path:
    d = tmp_path / "usercfg"
    monkeypatch.setattr(cfg_mod, "user_config_dir", lambda appname: str(d))
    return d


def _parser(text: str) -> configparser.ConfigParser:
    p = configparser.ConfigParser(interpolation=None)
    p.read_string(text)
    return p


# ------------------------------
# load_app_config()
# ------------------------------
def test_defaults_when_no_config_file(user_dir: Path):
    cfg = load_app_config()

    assert isinstance(cfg, AppConfig)
    assert cfg.source is None
    assert cfg.editor_font() == (None, None)
    assert cfg.wrap_lines() is True
    assert cfg.file_filter() == "Text files (*.txt);;All files (*)"
    assert cfg.printer_name() is None
    assert cfg.log_level() == "WARNING"


def test_user_config_dir_is_used(user_dir: Path):
    ini = _write(user_dir / "config.ini", "[print]\nprinter_name = Office\n")

    assert user_config_path() == ini
    cfg = load_app_config()
    assert cfg.source == ini
    assert cfg.printer_name() == "Office"


def test_explicit_file_wins_over_user_dir(user_dir: Path, tmp_path: Path):
    _write(user_dir / "config.ini", "[print]\nprinter_name = Office\n")
    explicit = _write(tmp_path / "explicit.ini", "[print]\nprinter_name = Lab\n")

    cfg = load_app_config(explicit_ini=explicit)
    assert cfg.source == explicit
    assert cfg.printer_name() == "Lab"


def test_missing_explicit_file_falls_back_to_user_dir(user_dir: Path, tmp_path: Path):
    ini = _write(user_dir / "config.ini", "[logging]\nlevel = info\n")

    cfg = load_app_config(explicit_ini=tmp_path / "nope.ini")
    assert cfg.source == ini
    assert cfg.log_level() == "INFO"


def test_malformed_explicit_file_is_skipped(user_dir: Path, tmp_path: Path, caplog):
    ini = _write(user_dir / "config.ini", "[files]\nfilter = Logs (*.log)\n")
    broken = _write(tmp_path / "broken.ini", "no section header here\n")

    with caplog.at_level("WARNING", logger=cfg_mod.__name__):
        cfg = load_app_config(explicit_ini=broken)

    assert cfg.source == ini
    assert cfg.file_filter() == "Logs (*.log)"
    assert any("broken.ini" in r.getMessage() for r in caplog.records)


def test_malformed_user_file_gives_defaults(user_dir: Path):
    _write(user_dir / "config.ini", "[editor\nwrap = false\n")

    cfg = load_app_config()
    assert cfg == AppConfig()


def test_percent_signs_are_not_interpolated(user_dir: Path):
    _write(user_dir / "config.ini", "[files]\nfilter = 100% text (*.txt)\n")
    assert load_app_config().file_filter() == "100% text (*.txt)"


# ------------------------------
# AppConfig.from_parser()
# ------------------------------
def test_from_parser_reads_every_section(tmp_path: Path):
    src = tmp_path / "c.ini"
    cfg = AppConfig.from_parser(
        _parser(
            "[editor]\nfont_family = Courier\nfont_size = 11\nwrap = false\n"
            "[files]\nfilter = Markdown (*.md)\n"
            "[print]\nprinter_name = Office\n"
            "[logging]\nlevel = debug\n"
        ),
        source=src,
    )

    assert cfg.source == src
    assert cfg.editor_font() == ("Courier", 11)
    assert cfg.wrap_lines() is False
    assert cfg.file_filter() == "Markdown (*.md)"
    assert cfg.printer_name() == "Office"
    assert cfg.log_level() == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-3", "big", ""])
def test_unusable_font_size_is_ignored(raw: str):
    cfg = AppConfig.from_parser(_parser(f"[editor]\nfont_family = Mono\nfont_size = {raw}\n"))
    assert cfg.editor_font() == ("Mono", None)


@pytest.mark.parametrize(
    "raw,expected",
    [("yes", True), ("On", True), ("1", True), ("no", False), ("OFF", False), ("0", False), ("maybe", True)],
)
def test_wrap_accepts_bool_spellings(raw: str, expected: bool):
    cfg = AppConfig.from_parser(_parser(f"[editor]\nwrap = {raw}\n"))
    assert cfg.wrap_lines() is expected


def test_blank_values_keep_defaults():
    cfg = AppConfig.from_parser(
        _parser("[files]\nfilter =\n[print]\nprinter_name =   \n[logging]\nlevel =\n")
    )
    assert cfg.file_filter() == "Text files (*.txt);;All files (*)"
    assert cfg.printer_name() is None
    assert cfg.log_level() == "WARNING"


# ------------------------------
# installed_version()
# ------------------------------
def test_installed_version_reads_distribution_metadata(monkeypatch):
    seen = []

    def fake_version(name: str) -> str:
        seen.append(name)
        return "4.5.6"

    monkeypatch.setattr(cfg_mod, "version", fake_version)
    assert installed_version() == "4.5.6"
    assert seen == ["qnotepad"]


def test_installed_version_without_distribution(monkeypatch):
    def missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(cfg_mod, "version", missing)
    assert installed_version() == "0.0.0"
