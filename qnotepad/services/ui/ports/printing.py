from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IPrintDialogService(Protocol):
    """Abstract UI port for choosing a printer."""

    def select_printer(self, parent: Any | None) -> Any | None:
        """Return a configured printer, or None if the user rejected the dialog."""
        ...
