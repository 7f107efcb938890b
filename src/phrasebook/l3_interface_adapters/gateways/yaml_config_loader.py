"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from phrasebook.l1_entities.config import AppConfig
from phrasebook.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('phrasebook.config')


class YamlConfigLoader:
    """Reads the user's config file.

    An explicit path must exist. Without one, the first existing file in
    ``search_paths`` is used; none at all means an empty config. ``source``
    records which file the last load came from.
    """

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self._search_paths = list(search_paths) if search_paths is not None else list(DEFAULT_CONFIG_PATHS)
        self.source: Path | None = None

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """User settings as a plain dict, *overrides* applied, not yet validated."""
        self.source = self._resolve(config_path)
        data = _read_mapping(self.source) if self.source is not None else {}
        if self.source is not None:
            log.debug('Config read from %s', self.source)
        return merge_config(data, overrides) if overrides else data

    def _resolve(self, config_path: str | None) -> Path | None:
        if config_path is not None:
            path = Path(config_path).expanduser()
            if not path.is_file():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in self._search_paths if p.is_file()), None)


def _read_mapping(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f'Invalid YAML in {path}: {e}') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must be a mapping of settings: {path}')
    return data


def merge_config(base: dict, override: dict) -> dict:
    """Return *base* with *override* layered on top; nested sections merge key by key.

    Neither argument is modified.
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_config(current, value)
        else:
            result[key] = value
    return result
