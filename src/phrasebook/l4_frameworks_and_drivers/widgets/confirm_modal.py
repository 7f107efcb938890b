"""Confirm modal — yes/no dialog shown before deleting a template."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmModal(ModalScreen[bool]):
    """Modal that asks to confirm a destructive action. y → True, n/Escape → False."""

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }
    #confirm-dialog {
        width: 56;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }
    #confirm-msg {
        width: 1fr;
        text-align: center;
        margin-bottom: 1;
    }
    #confirm-buttons {
        width: 100%;
        align-horizontal: center;
    }
    #confirm-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding('y', 'confirm', 'Yes'),
        Binding('n', 'reject', 'No'),
        Binding('escape', 'reject', 'Cancel'),
        Binding('left', 'focus_previous', 'Focus previous', show=False),
        Binding('right', 'focus_next', 'Focus next', show=False),
    ]

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._message = message

    def compose(self) -> ComposeResult:
        with Vertical(id='confirm-dialog'):
            yield Static(self._message, id='confirm-msg')
            with Center(id='confirm-buttons'):
                yield Button('No (n)', id='confirm-no', variant='default')
                yield Button('Yes (y)', id='confirm-yes', variant='error')

    def on_mount(self) -> None:
        self.query_one('#confirm-no', Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == 'confirm-yes')

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_reject(self) -> None:
        self.dismiss(False)
