"""Help modal — keybinding reference overlay."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static

HELP_MD = """\
| Key | Action |
|-----|--------|
| `/` | Focus search |
| `n` | New template |
| `e` | Edit selected template |
| `x` | Delete selected template |
| `c` / `Ctrl+K` | Copy body to clipboard |
| `a` | Show all (clear search and section) |
| `Tab` | Switch panel |
| `h` | Toggle this help |
| `q` | Quit |

The body panel can be edited before copying. Those edits are not saved;
use `e` to change a template permanently.
"""


class HelpModal(ModalScreen[None]):
    """Dismissible overlay listing keybindings."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }
    HelpModal > VerticalScroll {
        width: 64;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #help-title {
        text-style: bold;
        margin-bottom: 1;
    }
    #help-body {
        height: auto;
    }
    #help-hint {
        color: $text-muted;
        text-align: center;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('h', 'dismiss', 'Close'),
    ]

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static('Keys', id='help-title')
            yield Markdown(HELP_MD, id='help-body')
            yield Static('Escape or h to close', id='help-hint')
