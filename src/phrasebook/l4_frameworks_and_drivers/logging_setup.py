"""File-based logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_path: Path, level: str = 'INFO') -> None:
    """Send everything under the 'phrasebook' logger to *log_path*.

    Calling again swaps the file handler instead of stacking another one.
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger('phrasebook')
    for old in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
        root.removeHandler(old)
        old.close()
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.setLevel(level.upper())
    root.addHandler(handler)
    logging.getLogger('phrasebook.app').info('Logging started → %s', log_path)
