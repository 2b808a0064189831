from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """Modal user notifications; the caller blocks until the user dismisses them."""

    def warning(self, parent: Any | None, title: str, text: str) -> None: ...
