"""Gateway: JSON file persistence — implements StoreGateway port."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from phrasebook.l1_entities.errors import PersistenceError
from phrasebook.l1_entities.template import TemplateStore

log = logging.getLogger('phrasebook.store')


class JsonStoreGateway:
    """Reads and writes the template store as a single UTF-8 JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> TemplateStore:
        try:
            raw = self._path.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(self._path, f'Cannot read template file ({e})') from e
        try:
            store = TemplateStore.model_validate_json(raw)
        except ValidationError as e:
            raise PersistenceError(self._path, f'Malformed template file ({e.error_count()} errors)') from e
        log.debug('Read %d templates from %s', len(store.templates), self._path.name)
        return store

    def write(self, store: TemplateStore) -> None:
        """Write to a temp file beside the target, then atomically replace it."""
        content = store.to_json() + '\n'
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f'.{self._path.name}.', suffix='.tmp', dir=self._path.parent)
            with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceError(self._path, f'Cannot save template file ({e})') from e
        log.debug('Wrote %d templates to %s', len(store.templates), self._path.name)
