from __future__ import annotations
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


class IFileService(Protocol):
    """Read/write whole text files in text mode. Failures raise OSError with a readable reason."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


@runtime_checkable
class ITextSurface(Protocol):
    """
    The editable text widget. It owns the buffer and its undo history;
    callers never keep a copy of the text.
    """

    def text(self) -> str: ...
    def set_text(self, text: str) -> None: ...

    def copy(self) -> None: ...
    def cut(self) -> None: ...
    def paste(self) -> None: ...
    def undo(self) -> None: ...
    def redo(self) -> None: ...

    def print_to(self, printer: Any) -> None: ...


class IAppConfig(Protocol):
    """Settings the window, dialogs, printer and logging are built from."""

    def editor_font(self) -> tuple[str | None, int | None]: ...
    def wrap_lines(self) -> bool: ...
    def file_filter(self) -> str: ...
    def printer_name(self) -> str | None: ...
    def log_level(self) -> str: ...
