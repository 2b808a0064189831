"""User configuration (config.ini) and the installed version."""

from .app_config import AppConfig, installed_version, load_app_config

__all__ = ["AppConfig", "installed_version", "load_app_config"]
