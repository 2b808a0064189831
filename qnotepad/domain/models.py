from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    """Identity of the file backing the editor; ``path is None`` means untitled."""

    path: Path | None = None

    @property
    def is_untitled(self) -> bool:
        return self.path is None
