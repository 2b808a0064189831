from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from qnotepad.di.container import Container
from qnotepad.services.config.app_config import installed_version, load_app_config
from qnotepad.utils.constants import APP_NAME, APP_ORG
from qnotepad.utils.log import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = load_app_config()
    configure_logging(config.log_level())
    version = installed_version()
    logger.info("Starting %s %s (config: %s)", APP_NAME, version, config.source)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    QApplication.setApplicationVersion(version)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
