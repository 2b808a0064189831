from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QDialog
from PyQt6.QtPrintSupport import QPrintDialog, QPrinter

from qnotepad.services.ui.ports.printing import IPrintDialogService


class QtPrintDialogService(IPrintDialogService):
    """Runs a modal QPrintDialog against a fresh QPrinter."""

    def __init__(self, printer_name: str | None = None) -> None:
        self._printer_name = printer_name

    def select_printer(self, parent: Any | None) -> QPrinter | None:
        printer = QPrinter()
        if self._printer_name:
            printer.setPrinterName(self._printer_name)
        dlg = QPrintDialog(printer, parent)
        if dlg.exec() == QDialog.DialogCode.Rejected:
            return None
        return printer
