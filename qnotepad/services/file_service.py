from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QFile, QIODevice, QTextStream

from qnotepad.domain.interfaces import IFileService

logger = logging.getLogger(__name__)

_READ_MODE = QIODevice.OpenModeFlag.ReadOnly | QIODevice.OpenModeFlag.Text
_WRITE_MODE = (
    QIODevice.OpenModeFlag.WriteOnly
    | QIODevice.OpenModeFlag.Truncate
    | QIODevice.OpenModeFlag.Text
)


class FileService(IFileService):
    """
    Whole-file text reads/writes through QFile in text mode.

    Reading normalizes line terminators to ``\\n``; writing emits the platform
    line separator. Writes overwrite the target in place (no temp file, no backup).
    Failures raise OSError carrying QFile.errorString().
    """

    def read_text(self, path: Path) -> str:
        f = QFile(str(path))
        if not f.open(_READ_MODE):
            raise OSError(f.errorString())
        try:
            text = QTextStream(f).readAll()
        finally:
            f.close()
        logger.debug("Read %d chars from %s", len(text), path)
        return text

    def write_text(self, path: Path, text: str) -> None:
        f = QFile(str(path))
        if not f.open(_WRITE_MODE):
            raise OSError(f.errorString())
        try:
            out = QTextStream(f)
            out << text
            out.flush()
            if out.status() != QTextStream.Status.Ok:
                raise OSError(f.errorString() or f"Write failed for: {path}")
        finally:
            f.close()
        logger.debug("Wrote %d chars to %s", len(text), path)
