"""List rows for the section pane and the template pane."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widgets import ListItem, Static

from phrasebook.l1_entities.template import Template

NO_SUMMARY = '(no summary)'


def summary_text(template: Template) -> str:
    """Summary line for a template, with a placeholder when blank."""
    return template.summary if template.summary.strip() else NO_SUMMARY


class SectionItem(ListItem):
    """Selectable section row. ``section`` is None for the "All" row."""

    def __init__(self, section: str | None, count: int) -> None:
        super().__init__()
        self.section = section
        name = escape(section) if section is not None else '[bold]All[/bold]'
        self._label_text = f'{name}  [dim]({count})[/dim]'

    def compose(self) -> ComposeResult:
        yield Static(self._label_text, markup=True)


class TemplateItem(ListItem):
    """Selectable row for a single template."""

    def __init__(self, template: Template) -> None:
        super().__init__()
        self.template_id = template.id
        self._label_text = (
            f'{escape(template.title)}  [dim]\\[{escape(template.section)}][/dim]\n'
            f'  [dim italic]{escape(summary_text(template))}[/dim italic]'
        )

    def compose(self) -> ComposeResult:
        yield Static(self._label_text, markup=True)
