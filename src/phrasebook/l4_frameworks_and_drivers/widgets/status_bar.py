"""Status bar — bottom bar showing the last action, list counts, and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from rich.markup import escape
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar: message │ shown/total │ active filter, hints right-aligned."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    StatusBar.-error {
        color: $error;
    }
    """

    message: reactive[str] = reactive('Ready')
    shown: reactive[int] = reactive(0)
    total: reactive[int] = reactive(0)
    filter_label: reactive[str] = reactive('')
    keybinding_hints: reactive[str] = reactive('')
    is_error: reactive[bool] = reactive(False)

    def watch_is_error(self, value: bool) -> None:
        self.set_class(value, '-error')

    def render(self) -> str:
        parts = [self.message, f'{self.shown}/{self.total}']
        if self.filter_label:
            parts.append(self.filter_label)
        plain = ' │ '.join(parts)
        left = escape(plain)

        hints = self.keybinding_hints
        if hints:
            content_width = (self.size.width or 80) - 2
            gap = content_width - cell_len(plain) - cell_len(hints.replace(r'\[', '['))
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
