from __future__ import annotations

from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService
from .qt_printing import QtPrintDialogService
from .qt_text_surface import QtTextSurfaceAdapter

__all__ = [
    "QtFileDialogService",
    "QtMessageService",
    "QtPrintDialogService",
    "QtTextSurfaceAdapter",
]
