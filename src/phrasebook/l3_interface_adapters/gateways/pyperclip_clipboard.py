"""Gateway: system clipboard via pyperclip — implements Clipboard port."""

from __future__ import annotations

import logging

import pyperclip

log = logging.getLogger('phrasebook.clipboard')


class PyperclipClipboard:
    """Copies text to the OS clipboard; reports failure instead of raising."""

    def copy(self, text: str) -> bool:
        if not text:
            return False
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            log.warning('Clipboard copy failed: %s', e)
            return False
        return True
