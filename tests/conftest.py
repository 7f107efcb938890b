"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from phrasebook.l1_entities.errors import PersistenceError
from phrasebook.l1_entities.template import Template, TemplateStore
from phrasebook.l2_use_cases.template_repository import TemplateRepository
from phrasebook.l3_interface_adapters.controllers.library_controller import LibraryController
from phrasebook.l3_interface_adapters.gateways.json_store_gateway import JsonStoreGateway

# --- Protocol-conforming Fakes ---


class FakeStoreGateway:
    """In-memory store gateway. ``stored is None`` means no file on disk."""

    def __init__(self, store: TemplateStore | None = None, path: Path | None = None):
        self._path = path or Path('/fake/templates.json')
        self.stored: TemplateStore | None = store
        self.write_calls: int = 0
        self.fail_writes = False
        self.read_error: PersistenceError | None = None

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self.stored is not None

    def read(self) -> TemplateStore:
        if self.read_error is not None:
            raise self.read_error
        assert self.stored is not None
        return self.stored.model_copy(deep=True)

    def write(self, store: TemplateStore) -> None:
        self.write_calls += 1
        if self.fail_writes:
            raise PersistenceError(self._path, 'Cannot save template file (disk full)')
        self.stored = store.model_copy(deep=True)

    def set_read_error(self, message: str = 'Malformed template file') -> None:
        self.read_error = PersistenceError(self._path, message)


class FakeClipboard:
    """Records copied text; can be told to fail."""

    def __init__(self, succeed: bool = True):
        self._succeed = succeed
        self.copied: list[str] = []

    def copy(self, text: str) -> bool:
        if not text or not self._succeed:
            return False
        self.copied.append(text)
        return True


def make_store(*specs: tuple[str, str, str]) -> TemplateStore:
    """Build a store from (title, section, body) triples with ids 1..n."""
    templates = [
        Template(id=i, title=title, section=section, body=body) for i, (title, section, body) in enumerate(specs, 1)
    ]
    return TemplateStore(templates=templates, next_id=len(templates) + 1)


SAMPLE_SPECS = (
    ('Greeting', 'General', 'Hello'),
    ('Meeting request', 'Work', 'Could we meet on {date}?'),
    ('お礼', 'work', 'ありがとうございました。'),
)


# --- Standard Fixtures ---


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / 'data' / 'templates.json'


@pytest.fixture
def fake_gateway() -> FakeStoreGateway:
    return FakeStoreGateway(make_store(*SAMPLE_SPECS))


@pytest.fixture
def sample_repo(fake_gateway: FakeStoreGateway) -> TemplateRepository:
    repo = TemplateRepository(fake_gateway)
    repo.load()
    return repo


@pytest.fixture
def file_repo(data_file: Path) -> TemplateRepository:
    repo = TemplateRepository(JsonStoreGateway(data_file))
    repo.load()
    return repo


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def controller(sample_repo: TemplateRepository, fake_clipboard: FakeClipboard) -> LibraryController:
    ctl = LibraryController(sample_repo, fake_clipboard)
    ctl.reload()
    return ctl
