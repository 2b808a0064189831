from __future__ import annotations

from PyQt6.QtPrintSupport import QPrinter
from PyQt6.QtWidgets import QTextEdit

from qnotepad.domain.interfaces import ITextSurface


class QtTextSurfaceAdapter(ITextSurface):
    """Narrow adapter over QTextEdit; the widget keeps the buffer and undo stack."""

    def __init__(self, edit: QTextEdit):
        self._e = edit

    def text(self) -> str:
        return self._e.toPlainText()

    def set_text(self, text: str) -> None:
        self._e.setPlainText(text)

    def copy(self) -> None:
        self._e.copy()

    def cut(self) -> None:
        self._e.cut()

    def paste(self) -> None:
        self._e.paste()

    def undo(self) -> None:
        self._e.undo()

    def redo(self) -> None:
        self._e.redo()

    def print_to(self, printer: QPrinter) -> None:
        self._e.print(printer)
