"""Shared path constants for configuration, data, and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_documents_path, user_log_path

APP_NAME = 'phrasebook'

CONFIG_DIR = user_config_path(APP_NAME)
DATA_DIR = user_documents_path() / APP_NAME
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_DATA_FILE = DATA_DIR / 'templates.json'
DEFAULT_LOG_FILE = LOG_DIR / 'phrasebook.log'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
