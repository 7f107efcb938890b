"""Application defaults and config assembly — lives in L4, not domain."""

from __future__ import annotations

from phrasebook.l1_entities.config import AppConfig
from phrasebook.l3_interface_adapters.gateways.paths import DEFAULT_DATA_FILE, DEFAULT_LOG_FILE
from phrasebook.l3_interface_adapters.gateways.yaml_config_loader import merge_config

APP_CONFIG_DEFAULTS: dict = {
    'storage': {
        'path': str(DEFAULT_DATA_FILE),
    },
    'logging': {
        'level': 'INFO',
        'file': str(DEFAULT_LOG_FILE),
    },
    'ui': {
        'confirm_delete': True,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Layer *raw* user settings over the defaults, then validate."""
    return AppConfig.model_validate(merge_config(APP_CONFIG_DEFAULTS, raw))
