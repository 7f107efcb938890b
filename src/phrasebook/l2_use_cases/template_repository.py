"""Use case: template repository — sole owner of the store and its persistence."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from phrasebook.l1_entities.errors import NotFoundError, PersistenceError
from phrasebook.l1_entities.template import Template, TemplateDraft, TemplateStore, local_now
from phrasebook.l2_use_cases.ports.store_gateway import StoreGateway

log = logging.getLogger('phrasebook.repo')


class TemplateRepository:
    """CRUD and query operations over an in-memory TemplateStore.

    Every mutation builds the next store, writes it through the gateway,
    and only then replaces the in-memory store. A failed write raises
    PersistenceError and leaves memory as it was. Records handed out are
    copies; changes go through update().
    """

    def __init__(self, gateway: StoreGateway) -> None:
        self._gateway = gateway
        self._store = TemplateStore()

    @property
    def path(self) -> Path:
        return self._gateway.path

    @property
    def next_id(self) -> int:
        return self._store.next_id

    # --- Persistence ---

    def load(self) -> None:
        """Load the store from disk, creating an empty document if none exists."""
        if not self._gateway.exists():
            log.info('No template file at %s; creating an empty one', self.path)
            self._store = TemplateStore()
            self.save()
            return
        try:
            self._store = self._gateway.read()
        except PersistenceError:
            self._store = TemplateStore()
            log.error('Failed to load templates from %s', self.path, exc_info=True)
            raise
        log.info('Loaded %d templates (next id %d)', len(self._store.templates), self._store.next_id)

    def save(self) -> None:
        """Write the whole store to disk."""
        self._gateway.write(self._store)

    def _commit(self, store: TemplateStore) -> None:
        self._gateway.write(store)
        self._store = store

    # --- Queries ---

    def get_all(self) -> list[Template]:
        return [t.model_copy(deep=True) for t in self._store.templates]

    def get_by_id(self, template_id: int) -> Template | None:
        found = self._store.find(template_id)
        return found.model_copy(deep=True) if found is not None else None

    def search(self, keyword: str) -> list[Template]:
        """Case-insensitive substring match on title. Blank keyword returns everything."""
        if not keyword or not keyword.strip():
            return self.get_all()
        needle = keyword.lower()
        return [t.model_copy(deep=True) for t in self._store.templates if needle in t.title.lower()]

    def get_by_section(self, section: str) -> list[Template]:
        """Exact, case-insensitive section match."""
        wanted = section.lower()
        return [t.model_copy(deep=True) for t in self._store.templates if t.section.lower() == wanted]

    def get_sections(self) -> list[str]:
        """Distinct section strings, sorted. Case variants stay separate entries."""
        return sorted({t.section for t in self._store.templates})

    def get_section_counts(self) -> dict[str, int]:
        return dict(Counter(t.section for t in self._store.templates))

    # --- Mutations ---

    def add(self, template: Template | TemplateDraft) -> Template:
        """Append a new template. Caller-supplied id and timestamps are ignored."""
        now = local_now()
        created = Template(
            id=self._store.next_id,
            title=template.title,
            body=template.body,
            section=template.section,
            summary=getattr(template, 'summary', ''),
            created_at=now,
            updated_at=now,
        )
        self._commit(
            self._store.model_copy(
                update={
                    'templates': [*self._store.templates, created],
                    'next_id': self._store.next_id + 1,
                }
            )
        )
        log.info('Added template %d (%r, section %r)', created.id, created.title, created.section)
        return created.model_copy(deep=True)

    def update(self, template: Template | TemplateDraft) -> Template:
        """Overwrite title, body and section of an existing template in place."""
        if template.id is None:
            raise ValueError('Cannot update a template without an id')
        index = self._index_of(template.id)
        existing = self._store.templates[index]
        updated = existing.model_copy(
            update={
                'title': template.title,
                'body': template.body,
                'section': template.section,
                'updated_at': local_now(),
            }
        )
        templates = list(self._store.templates)
        templates[index] = updated
        self._commit(self._store.model_copy(update={'templates': templates}))
        log.info('Updated template %d (%r)', updated.id, updated.title)
        return updated.model_copy(deep=True)

    def delete(self, template_id: int) -> Template:
        """Remove a template. Returns the removed record."""
        index = self._index_of(template_id)
        removed = self._store.templates[index]
        templates = [t for i, t in enumerate(self._store.templates) if i != index]
        self._commit(self._store.model_copy(update={'templates': templates}))
        log.info('Deleted template %d (%r)', removed.id, removed.title)
        return removed.model_copy(deep=True)

    def _index_of(self, template_id: int) -> int:
        for i, tmpl in enumerate(self._store.templates):
            if tmpl.id == template_id:
                return i
        raise NotFoundError(template_id)
