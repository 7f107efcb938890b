"""Port: store gateway for reading and writing the persisted template store."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from phrasebook.l1_entities.template import TemplateStore


class StoreGateway(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract whole-document persistence for the template store.

    Implementations raise PersistenceError for any I/O or format failure.
    """

    @property
    def path(self) -> Path:
        """Location of the persisted document."""
        ...

    def exists(self) -> bool:
        """Whether a persisted document is present."""
        ...

    def read(self) -> TemplateStore:
        """Read and validate the persisted document."""
        ...

    def write(self, store: TemplateStore) -> None:
        """Replace the persisted document with *store*, all or nothing."""
        ...
