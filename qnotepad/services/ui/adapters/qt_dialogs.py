from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from qnotepad.services.ui.ports.dialogs import IFileDialogService


def _selected_path(result: tuple[str, str]) -> Path | None:
    # QFileDialog statics return (path, chosen filter); an empty path is a cancel.
    selected, _ = result
    return Path(selected) if selected else None


class QtFileDialogService(IFileDialogService):
    """Native open/save dialogs via the QFileDialog static helpers."""

    def ask_open_path(
        self, parent: Any | None, caption: str, start: str | None, name_filter: str
    ) -> Path | None:
        return _selected_path(
            QFileDialog.getOpenFileName(parent, caption, start or "", name_filter)
        )

    def ask_save_path(
        self, parent: Any | None, caption: str, start: str | None, name_filter: str
    ) -> Path | None:
        return _selected_path(
            QFileDialog.getSaveFileName(parent, caption, start or "", name_filter)
        )
