from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from qnotepad.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.warning(parent, title, text)
