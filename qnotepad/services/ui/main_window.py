from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QTextEdit, QToolBar

from qnotepad.domain.interfaces import IAppConfig, IFileService
from qnotepad.services.document_session import DocumentSession
from qnotepad.services.ui.adapters.qt_text_surface import QtTextSurfaceAdapter
from qnotepad.services.ui.ports.dialogs import IFileDialogService
from qnotepad.services.ui.ports.messages import IMessageService
from qnotepad.services.ui.ports.printing import IPrintDialogService
from qnotepad.utils.constants import APP_NAME, DEFAULT_FILE_FILTER


class MainWindow(QMainWindow):
    """Thin PyQt window: one text surface, one DocumentSession, actions wired to it."""

    def __init__(
        self,
        file_service: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        printers: IPrintDialogService,
        *,
        config: IAppConfig | None = None,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(800, 600)

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.setCentralWidget(self.editor)
        self._apply_config(config)

        self.surface = QtTextSurfaceAdapter(self.editor)
        self.session = DocumentSession(
            view=self,
            surface=self.surface,
            files=file_service,
            dialogs=dialogs,
            messages=messages,
            printers=printers,
            app_title=app_title,
            file_filter=config.file_filter() if config is not None else DEFAULT_FILE_FILTER,
        )

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()

        if start_path:
            self.session.open_path(start_path)

    # ---------- IMainView ----------
    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def quit_app(self) -> None:
        app = QApplication.instance()
        if app is not None:
            app.quit()

    # ---------- UI creation ----------
    def _apply_config(self, config: IAppConfig | None) -> None:
        if config is None:
            return
        family, size = config.editor_font()
        if family or size:
            font = QFont(self.editor.font())
            if family:
                font.setFamily(family)
            if size:
                font.setPointSize(size)
            self.editor.setFont(font)
        mode = (
            QTextEdit.LineWrapMode.WidgetWidth
            if config.wrap_lines()
            else QTextEdit.LineWrapMode.NoWrap
        )
        self.editor.setLineWrapMode(mode)

    def _build_actions(self):
        s = self.session

        # File actions
        self.act_new = QAction(
            "&New", self, shortcut=QKeySequence.StandardKey.New, triggered=s.new_document
        )
        self.act_open = QAction(
            "&Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=s.open
        )
        self.act_save = QAction(
            "&Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=s.save
        )
        self.act_save_as = QAction(
            "Save &As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=s.save_as,
        )
        self.act_print = QAction(
            "&Print…", self, shortcut=QKeySequence.StandardKey.Print, triggered=s.print_document
        )
        self.act_exit = QAction("E&xit", self, shortcut="Ctrl+Q", triggered=s.exit)
        self.act_exit.setStatusTip("Exit application")

        # Edit actions
        self.act_undo = QAction(
            "&Undo", self, shortcut=QKeySequence.StandardKey.Undo, triggered=s.undo
        )
        self.act_redo = QAction(
            "&Redo", self, shortcut=QKeySequence.StandardKey.Redo, triggered=s.redo
        )
        self.act_cut = QAction("Cu&t", self, shortcut=QKeySequence.StandardKey.Cut, triggered=s.cut)
        self.act_copy = QAction(
            "&Copy", self, shortcut=QKeySequence.StandardKey.Copy, triggered=s.copy
        )
        self.act_paste = QAction(
            "&Paste", self, shortcut=QKeySequence.StandardKey.Paste, triggered=s.paste
        )

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as, self.act_print):
            tb.addAction(a)
        tb.addSeparator()
        for a in (self.act_undo, self.act_redo, self.act_cut, self.act_copy, self.act_paste):
            tb.addAction(a)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        self.file_menu = filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_print)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        self.edit_menu = editm = m.addMenu("&Edit")
        editm.addAction(self.act_undo)
        editm.addAction(self.act_redo)
        editm.addSeparator()
        for a in (self.act_cut, self.act_copy, self.act_paste):
            editm.addAction(a)
