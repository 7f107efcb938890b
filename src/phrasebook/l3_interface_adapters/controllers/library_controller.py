"""LibraryController — holds view state and routes user actions to the repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from phrasebook.l1_entities.errors import NotFoundError, PersistenceError
from phrasebook.l1_entities.template import Template, TemplateDraft
from phrasebook.l2_use_cases.ports.clipboard import Clipboard
from phrasebook.l2_use_cases.template_repository import TemplateRepository

log = logging.getLogger('phrasebook.controller')


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a user action — ok flag plus the status line to show."""

    ok: bool
    message: str


class LibraryController:
    """Central coordinator between the TUI and the repository.

    Owns the visible template list, the section list, the current
    selection and its editable body, and the status message. Repository
    errors are turned into failed ActionResults; nothing here raises.
    """

    def __init__(self, repository: TemplateRepository, clipboard: Clipboard) -> None:
        self._repo = repository
        self._clipboard = clipboard

        self.templates: list[Template] = []
        self.sections: list[str] = []
        self.section_counts: dict[str, int] = {}
        self.selected: Template | None = None
        self.editable_body: str = ''
        self.search_keyword: str = ''
        self.selected_section: str | None = None
        self.status_message: str = 'Ready'

    @property
    def repository(self) -> TemplateRepository:
        return self._repo

    def _report(self, ok: bool, message: str) -> ActionResult:
        self.status_message = message
        return ActionResult(ok=ok, message=message)

    def _refresh_sections(self) -> None:
        self.sections = self._repo.get_sections()
        self.section_counts = self._repo.get_section_counts()

    def _resync_selection(self) -> None:
        """Point the selection at the stored record, or clear it if gone."""
        if self.selected is None:
            return
        current = self._repo.get_by_id(self.selected.id)
        self.selected = current
        self.editable_body = current.body if current is not None else ''

    # --- Loading and filtering ---

    def _visible(self) -> list[Template]:
        if self.selected_section:
            return self._repo.get_by_section(self.selected_section)
        return self._repo.search(self.search_keyword)

    def reload(self) -> ActionResult:
        """Re-read the visible list under the current filter and refresh sections."""
        self.templates = self._visible()
        self._refresh_sections()
        self._resync_selection()
        return self._report(True, f'Loaded {len(self.templates)} templates')

    def show_all(self) -> ActionResult:
        self.search_keyword = ''
        self.selected_section = None
        return self.reload()

    def search(self, keyword: str) -> ActionResult:
        self.search_keyword = keyword
        self.selected_section = None
        self.templates = self._repo.search(keyword)
        return self._report(True, f'Search results: {len(self.templates)}')

    def filter_by_section(self, section: str | None) -> ActionResult:
        if not section:
            return self.show_all()
        self.search_keyword = ''
        self.selected_section = section
        self.templates = self._repo.get_by_section(section)
        return self._report(True, f'Section "{section}": {len(self.templates)}')

    # --- Selection and editing ---

    def select(self, template_id: int | None) -> Template | None:
        """Select a template by id; its body becomes the editable body."""
        self.selected = self._repo.get_by_id(template_id) if template_id is not None else None
        self.editable_body = self.selected.body if self.selected is not None else ''
        return self.selected

    def set_body(self, text: str) -> None:
        """Temporary edit of the body before copying; never persisted."""
        self.editable_body = text

    def copy_body(self) -> ActionResult:
        if not self.editable_body.strip():
            return self._report(False, 'Nothing to copy')
        if not self._clipboard.copy(self.editable_body):
            return self._report(False, 'Copy to clipboard failed')
        name = self.selected.title if self.selected is not None else 'edited text'
        return self._report(True, f'Copied "{name}" to clipboard')

    # --- Mutations ---

    def add(self, draft: TemplateDraft) -> ActionResult:
        try:
            created = self._repo.add(draft)
        except PersistenceError as e:
            log.error('Add failed: %s', e)
            return self._report(False, f'Add failed: {e}')
        self.reload()
        return self._report(True, f'Added "{created.title}"')

    def update(self, draft: TemplateDraft) -> ActionResult:
        try:
            updated = self._repo.update(draft)
        except (NotFoundError, PersistenceError, ValueError) as e:
            log.error('Update failed: %s', e)
            return self._report(False, f'Update failed: {e}')
        self.reload()
        return self._report(True, f'Updated "{updated.title}"')

    def delete(self, template_id: int) -> ActionResult:
        try:
            removed = self._repo.delete(template_id)
        except (NotFoundError, PersistenceError) as e:
            log.error('Delete failed: %s', e)
            return self._report(False, f'Delete failed: {e}')
        if self.selected is not None and self.selected.id == template_id:
            self.selected = None
            self.editable_body = ''
        self.reload()
        return self._report(True, f'Deleted "{removed.title}"')
