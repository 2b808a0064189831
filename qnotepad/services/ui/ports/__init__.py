from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import IMessageService
from .printing import IPrintDialogService

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "IPrintDialogService",
]
