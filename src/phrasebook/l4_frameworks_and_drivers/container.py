"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from phrasebook.l1_entities.config import AppConfig
from phrasebook.l2_use_cases.ports.clipboard import Clipboard
from phrasebook.l2_use_cases.ports.config_loader import ConfigLoader
from phrasebook.l2_use_cases.ports.store_gateway import StoreGateway
from phrasebook.l2_use_cases.template_repository import TemplateRepository
from phrasebook.l3_interface_adapters.controllers.library_controller import LibraryController
from phrasebook.l3_interface_adapters.gateways.json_store_gateway import JsonStoreGateway
from phrasebook.l3_interface_adapters.gateways.pyperclip_clipboard import PyperclipClipboard
from phrasebook.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        gateway: StoreGateway | None = None,
        clipboard: Clipboard | None = None,
    ) -> None:
        self.config = config
        self.gateway: StoreGateway = gateway or JsonStoreGateway(Path(config.storage.path).expanduser())
        self.clipboard: Clipboard = clipboard or PyperclipClipboard()
        self.repository = TemplateRepository(self.gateway)
        self.controller = LibraryController(self.repository, self.clipboard)

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
