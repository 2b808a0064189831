from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """Asks the user for a path. ``None`` always means the dialog was cancelled."""

    def ask_open_path(
        self, parent: Any | None, caption: str, start: str | None, name_filter: str
    ) -> Path | None: ...

    def ask_save_path(
        self, parent: Any | None, caption: str, start: str | None, name_filter: str
    ) -> Path | None: ...
