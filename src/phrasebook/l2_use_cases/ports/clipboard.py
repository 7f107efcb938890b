"""Port: system clipboard."""

from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract text clipboard."""

    def copy(self, text: str) -> bool:
        """Put *text* on the clipboard. Returns False on empty text or failure."""
        ...
