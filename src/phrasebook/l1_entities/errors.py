"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class PersistenceError(Exception):
    """Raised when the template store cannot be loaded from or saved to disk."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f'{message}: {path}')
        self.path = path


class NotFoundError(Exception):
    """Raised when an update or delete references a template id that does not exist."""

    def __init__(self, template_id: int) -> None:
        super().__init__(f'Template not found: id {template_id}')
        self.template_id = template_id
