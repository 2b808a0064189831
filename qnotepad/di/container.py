from __future__ import annotations

from pathlib import Path

from qnotepad.domain.interfaces import IAppConfig, IFileService
from qnotepad.services.config.app_config import load_app_config
from qnotepad.services.file_service import FileService
from qnotepad.services.ui.adapters import (
    QtFileDialogService,
    QtMessageService,
    QtPrintDialogService,
)
from qnotepad.services.ui.main_window import MainWindow
from qnotepad.services.ui.ports import IFileDialogService, IMessageService, IPrintDialogService
from qnotepad.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the main window with everything injected
    """

    def __init__(
        self,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        printers: IPrintDialogService | None = None,
        config: IAppConfig | None = None,
    ) -> None:
        self.config: IAppConfig = config or load_app_config()
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.printers: IPrintDialogService = printers or QtPrintDialogService(
            printer_name=self.config.printer_name()
        )

    @staticmethod
    def default(config: IAppConfig | None = None) -> Container:
        """Build a container with Qt-backed adapters and the resolved app config."""
        return Container(config=config)

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        return MainWindow(
            file_service=self.file_service,
            dialogs=self.dialogs,
            messages=self.messages,
            printers=self.printers,
            config=self.config,
            start_path=start_path,
            app_title=app_title,
        )
