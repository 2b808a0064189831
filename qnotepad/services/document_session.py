from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from qnotepad.domain.interfaces import IFileService, ITextSurface
from qnotepad.domain.models import Document
from qnotepad.services.ui.ports.dialogs import IFileDialogService
from qnotepad.services.ui.ports.messages import IMessageService
from qnotepad.services.ui.ports.printing import IPrintDialogService
from qnotepad.utils.constants import (
    APP_NAME,
    DEFAULT_FILE_FILTER,
    MSG_CANNOT_OPEN,
    MSG_CANNOT_PRINT,
    MSG_CANNOT_SAVE,
    OPEN_CAPTION,
    SAVE_AS_CAPTION,
    WARNING_TITLE,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Window chrome the session drives (implemented by the Qt MainWindow)."""

    def set_title(self, title: str) -> None: ...
    def quit_app(self) -> None: ...


class DocumentSession:
    """
    Tracks which file (if any) backs the text surface and runs the file commands.

    The surface owns the text; the session only keeps ``doc.path``. Every command
    returns True when it completed, False when it was cancelled or failed. Failures
    are reported through the message port and leave path, title and text untouched.
    """

    def __init__(
        self,
        view: IMainView,
        surface: ITextSurface,
        files: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        printers: IPrintDialogService,
        *,
        app_title: str = APP_NAME,
        file_filter: str = DEFAULT_FILE_FILTER,
    ) -> None:
        self.view = view
        self.surface = surface
        self.files = files
        self.dialogs = dialogs
        self.messages = messages
        self.printers = printers
        self.app_title = app_title
        self.file_filter = file_filter

        self.doc = Document()

    @property
    def current_path(self) -> Path | None:
        return self.doc.path

    # ---------- File commands ----------

    def new_document(self) -> bool:
        """Forget the current file and clear the surface. Unsaved text is discarded."""
        self.doc = Document()
        self.surface.set_text("")
        self.view.set_title(self.app_title)
        return True

    def open(self) -> bool:
        start_dir = None if self.doc.is_untitled else str(self.doc.path.parent)
        path = self.dialogs.ask_open_path(self._parent, OPEN_CAPTION, start_dir, self.file_filter)
        if path is None:
            return False
        return self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            text = self.files.read_text(path)
        except OSError as e:
            self._warn(MSG_CANNOT_OPEN.format(reason=str(e)))
            return False
        self.doc = Document(path=path)
        self.view.set_title(str(path))
        self.surface.set_text(text)
        logger.info("Opened %s", path)
        return True

    def save(self) -> bool:
        if self.doc.is_untitled:
            return self.save_as()
        return self._write_to(self.doc.path)

    def save_as(self) -> bool:
        start = None if self.doc.is_untitled else str(self.doc.path)
        path = self.dialogs.ask_save_path(self._parent, SAVE_AS_CAPTION, start, self.file_filter)
        if path is None:
            return False
        if not self._write_to(path):
            return False
        self.doc.path = path
        self.view.set_title(str(path))
        return True

    def print_document(self) -> bool:
        printer = self.printers.select_printer(self._parent)
        if printer is None:
            self._warn(MSG_CANNOT_PRINT)
            return False
        self.surface.print_to(printer)
        logger.info("Sent document to printer")
        return True

    def exit(self) -> None:
        self.view.quit_app()

    # ---------- Edit commands (straight to the surface) ----------

    def copy(self) -> None:
        self.surface.copy()

    def cut(self) -> None:
        self.surface.cut()

    def paste(self) -> None:
        self.surface.paste()

    def undo(self) -> None:
        self.surface.undo()

    def redo(self) -> None:
        self.surface.redo()

    # ---------- Helpers ----------

    @property
    def _parent(self) -> Any | None:
        return self.view

    def _write_to(self, path: Path) -> bool:
        try:
            self.files.write_text(path, self.surface.text())
        except OSError as e:
            self._warn(MSG_CANNOT_SAVE.format(reason=str(e)))
            return False
        logger.info("Saved %s", path)
        return True

    def _warn(self, text: str) -> None:
        logger.warning(text)
        self.messages.warning(self._parent, WARNING_TITLE, text)
