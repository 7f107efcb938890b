"""phrasebook — keep, search, and copy reusable text templates."""

__version__ = '0.3.0'
