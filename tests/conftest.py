from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from qnotepad.services.document_session import DocumentSession  # noqa: E402
from qnotepad.services.file_service import FileService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Port fakes ---


class FakeSurface:
    """In-memory text surface that records delegated edit/print calls."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self.calls: list[str] = []
        self.printed_on: list[Any] = []

    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def copy(self) -> None:
        self.calls.append("copy")

    def cut(self) -> None:
        self.calls.append("cut")

    def paste(self) -> None:
        self.calls.append("paste")

    def undo(self) -> None:
        self.calls.append("undo")

    def redo(self) -> None:
        self.calls.append("redo")

    def print_to(self, printer: Any) -> None:
        self.printed_on.append(printer)


class FakeView:
    def __init__(self) -> None:
        self.title: str | None = None
        self.quit_calls = 0

    def set_title(self, title: str) -> None:
        self.title = title

    def quit_app(self) -> None:
        self.quit_calls += 1


class FakeDialogs:
    """Returns queued paths; None means the user cancelled."""

    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.open_calls: list[tuple[str, str | None, str]] = []
        self.save_calls: list[tuple[str, str | None, str]] = []

    def ask_open_path(self, parent, caption, start_dir, filter_str):
        self.open_calls.append((caption, start_dir, filter_str))
        return self.open_result

    def ask_save_path(self, parent, caption, start_path, filter_str):
        self.save_calls.append((caption, start_path, filter_str))
        return self.save_result


class RecordingMessages:
    def __init__(self) -> None:
        self.warnings: list[tuple[str, str]] = []

    def warning(self, parent, title: str, text: str) -> None:
        self.warnings.append((title, text))


class FakePrinters:
    def __init__(self, printer: Any | None = None) -> None:
        self.printer = printer
        self.calls = 0

    def select_printer(self, parent):
        self.calls += 1
        return self.printer


# --- Other common fixtures ---


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> RecordingMessages:
    return RecordingMessages()


@pytest.fixture()
def printers() -> FakePrinters:
    return FakePrinters()


@pytest.fixture()
def session(view, surface, file_service, dialogs, messages, printers) -> DocumentSession:
    return DocumentSession(
        view=view,
        surface=surface,
        files=file_service,
        dialogs=dialogs,
        messages=messages,
        printers=printers,
        app_title="Test",
    )
