"""LibraryApp — main TUI: sections, searchable template list, editable body, status bar."""

from __future__ import annotations

import logging

from rich.markup import escape
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, ListView, Static, TextArea

from phrasebook.l1_entities.config import UiConfig
from phrasebook.l1_entities.template import TemplateDraft
from phrasebook.l3_interface_adapters.controllers.library_controller import ActionResult, LibraryController
from phrasebook.l4_frameworks_and_drivers.widgets.confirm_modal import ConfirmModal
from phrasebook.l4_frameworks_and_drivers.widgets.editor_modal import EditorModal
from phrasebook.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from phrasebook.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from phrasebook.l4_frameworks_and_drivers.widgets.template_list import SectionItem, TemplateItem

log = logging.getLogger('phrasebook.app')

_HINTS = r'\[/] search  \[n] new  \[e] edit  \[x] delete  \[c] copy  \[h] help  \[q] quit'


class LibraryApp(TextualApp):
    """Thin shell over LibraryController. All state lives in the controller."""

    CSS = """
    #header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }
    #main-panels {
        height: 1fr;
    }
    #section-list {
        width: 1fr;
        min-width: 18;
        max-width: 30;
        border: solid $secondary;
        scrollbar-size: 1 1;
    }
    #list-pane {
        width: 2fr;
    }
    #search-input {
        dock: top;
    }
    #template-list {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    #template-list Static {
        height: 2;
        overflow: hidden hidden;
    }
    #body-editor {
        width: 3fr;
        border: solid $secondary;
    }
    #body-editor:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [
        Binding('q', 'quit_app', 'Quit'),
        Binding('slash', 'focus_search', 'Search', show=False),
        Binding('n', 'new_template', 'New', show=False),
        Binding('e', 'edit_template', 'Edit', show=False),
        Binding('x', 'delete_template', 'Delete', show=False),
        Binding('c', 'copy_body', 'Copy', show=False),
        Binding('ctrl+k', 'copy_body', 'Copy', show=False, priority=True),
        Binding('a', 'show_all', 'All', show=False),
        Binding('h', 'show_help', 'Help', show=False),
        Binding('tab', 'focus_next', 'Switch Panel', show=False),
    ]

    def __init__(
        self,
        controller: LibraryController,
        ui: UiConfig | None = None,
        startup_error: str = '',
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._ui = ui or UiConfig()
        self._startup_error = startup_error

    @property
    def controller(self) -> LibraryController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Static(f'  phrasebook | {escape(str(self._controller.repository.path))}', id='header')
        with Horizontal(id='main-panels'):
            section_list = ListView(id='section-list')
            section_list.border_title = 'Sections'
            yield section_list
            with Vertical(id='list-pane'):
                yield Input(placeholder='Search titles...', id='search-input')
                template_list = ListView(id='template-list')
                template_list.border_title = 'Templates'
                yield template_list
            body = TextArea(id='body-editor')
            body.border_title = 'Body'
            yield body
        yield StatusBar(id='status-bar')

    async def on_mount(self) -> None:
        self.query_one('#status-bar', StatusBar).keybinding_hints = _HINTS
        await self._apply(self._controller.reload())
        if self._startup_error:
            self._set_status(ActionResult(ok=False, message=self._startup_error))
            self.notify(escape(self._startup_error), severity='error', timeout=10)
        self.query_one('#template-list', ListView).focus()

    # --- View sync ---

    async def _apply(self, result: ActionResult) -> None:
        """Redraw lists and status bar from controller state."""
        await self._rebuild_sections()
        await self._rebuild_templates()
        self._show_body()
        bar = self.query_one('#status-bar', StatusBar)
        bar.message = result.message
        bar.is_error = not result.ok
        bar.shown = len(self._controller.templates)
        bar.total = sum(self._controller.section_counts.values())
        ctl = self._controller
        if ctl.selected_section:
            bar.filter_label = f'section: {ctl.selected_section}'
        elif ctl.search_keyword.strip():
            bar.filter_label = f'search: {ctl.search_keyword}'
        else:
            bar.filter_label = ''

    async def _rebuild_sections(self) -> None:
        list_view = self.query_one('#section-list', ListView)
        await list_view.clear()
        counts = self._controller.section_counts
        items = [SectionItem(None, sum(counts.values()))]
        items.extend(SectionItem(section, counts.get(section, 0)) for section in self._controller.sections)
        await list_view.extend(items)

    async def _rebuild_templates(self) -> None:
        list_view = self.query_one('#template-list', ListView)
        await list_view.clear()
        await list_view.extend(TemplateItem(tmpl) for tmpl in self._controller.templates)
        selected = self._controller.selected
        if selected is None:
            return
        for idx, tmpl in enumerate(self._controller.templates):
            if tmpl.id == selected.id:
                list_view.index = idx
                break

    def _show_body(self) -> None:
        editor = self.query_one('#body-editor', TextArea)
        if editor.text != self._controller.editable_body:
            editor.load_text(self._controller.editable_body)

    # --- Events ---

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != 'search-input':
            return
        # Clearing the box after a section filter must not undo that filter.
        if event.value == self._controller.search_keyword:
            return
        await self._apply(self._controller.search(event.value))

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if isinstance(event.item, TemplateItem):
            selected = self._controller.selected
            if selected is None or selected.id != event.item.template_id:
                self._controller.select(event.item.template_id)
                self._show_body()

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, SectionItem):
            self.query_one('#search-input', Input).value = ''
            await self._apply(self._controller.filter_by_section(event.item.section))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == 'body-editor':
            self._controller.set_body(event.text_area.text)

    # --- Actions ---

    def action_focus_search(self) -> None:
        self.query_one('#search-input', Input).focus()

    async def action_show_all(self) -> None:
        self.query_one('#search-input', Input).value = ''
        await self._apply(self._controller.show_all())

    def action_copy_body(self) -> None:
        result = self._controller.copy_body()
        self._set_status(result)
        self.notify(escape(result.message), severity='information' if result.ok else 'warning', timeout=3)

    def action_new_template(self) -> None:
        self.push_screen(EditorModal(self._controller.sections), callback=self._on_new_result)

    async def _on_new_result(self, draft: TemplateDraft | None) -> None:
        if draft is None:
            return
        await self._report(self._controller.add(draft))

    def action_edit_template(self) -> None:
        selected = self._controller.selected
        if selected is None:
            self.notify('Select a template first', severity='warning', timeout=3)
            return
        self.push_screen(
            EditorModal(self._controller.sections, draft=TemplateDraft.from_template(selected)),
            callback=self._on_edit_result,
        )

    async def _on_edit_result(self, draft: TemplateDraft | None) -> None:
        if draft is None:
            return
        await self._report(self._controller.update(draft))

    async def action_delete_template(self) -> None:
        selected = self._controller.selected
        if selected is None:
            self.notify('Select a template first', severity='warning', timeout=3)
            return
        if not self._ui.confirm_delete:
            await self._report(self._controller.delete(selected.id))
            return
        template_id = selected.id

        async def on_confirm(confirmed: bool | None) -> None:
            if not confirmed:
                self._set_status(ActionResult(ok=True, message='Delete cancelled'))
                return
            await self._report(self._controller.delete(template_id))

        self.push_screen(ConfirmModal(f'Delete "{escape(selected.title)}"?'), callback=on_confirm)

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return
        self.push_screen(HelpModal())

    def action_quit_app(self) -> None:
        self.exit()

    def _set_status(self, result: ActionResult) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.message = result.message
        bar.is_error = not result.ok

    async def _report(self, result: ActionResult) -> None:
        await self._apply(result)
        if not result.ok:
            log.warning('%s', result.message)
            self.notify(escape(result.message), severity='error', timeout=6)
