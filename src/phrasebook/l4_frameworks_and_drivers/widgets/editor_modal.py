"""Editor modal — form for creating or editing a template."""

from __future__ import annotations

from pydantic import ValidationError
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.suggester import SuggestFromList
from textual.widgets import Button, Input, Label, TextArea

from phrasebook.l1_entities.template import TemplateDraft


def first_error(exc: ValidationError) -> str:
    """Human-readable message for the first validation error."""
    err = exc.errors()[0]
    return str(err['msg']).removeprefix('Value error, ')


class EditorModal(ModalScreen[TemplateDraft | None]):
    """Title / section / body form. Save → TemplateDraft, Escape → None."""

    DEFAULT_CSS = """
    EditorModal {
        align: center middle;
    }
    EditorModal > Vertical {
        width: 80%;
        max-width: 100;
        height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #editor-heading {
        text-style: bold;
        margin-bottom: 1;
    }
    #editor-body {
        height: 1fr;
    }
    #editor-buttons {
        height: auto;
        align-horizontal: right;
        margin-top: 1;
    }
    #editor-buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding('escape', 'cancel', 'Cancel'),
        Binding('ctrl+s', 'save', 'Save', priority=True),
    ]

    def __init__(self, sections: list[str], draft: TemplateDraft | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._sections = sections
        self._draft = draft

    @property
    def is_edit(self) -> bool:
        return self._draft is not None

    def compose(self) -> ComposeResult:
        draft = self._draft
        with Vertical():
            yield Label('Edit template' if self.is_edit else 'New template', id='editor-heading')
            yield Input(value=draft.title if draft else '', placeholder='Title', id='editor-title')
            yield Input(
                value=draft.section if draft else '',
                placeholder='Section',
                suggester=SuggestFromList(self._sections, case_sensitive=False),
                id='editor-section',
            )
            yield TextArea(draft.body if draft else '', id='editor-body')
            with Horizontal(id='editor-buttons'):
                yield Button('Cancel', id='editor-cancel')
                yield Button('Save (Ctrl+S)', id='editor-save', variant='primary')

    def on_mount(self) -> None:
        self.query_one('#editor-title', Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'editor-save':
            self.action_save()
        else:
            self.action_cancel()

    def action_save(self) -> None:
        try:
            draft = TemplateDraft(
                id=self._draft.id if self._draft else None,
                title=self.query_one('#editor-title', Input).value,
                section=self.query_one('#editor-section', Input).value,
                body=self.query_one('#editor-body', TextArea).text,
            )
        except ValidationError as e:
            self.notify(first_error(e), severity='warning', timeout=4)
            return
        self.dismiss(draft)

    def action_cancel(self) -> None:
        self.dismiss(None)
