"""Tests for CLI entry point — patches deferred imports at source module level."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from phrasebook import __version__
from phrasebook.l1_entities.template import Template, TemplateStore
from phrasebook.l4_frameworks_and_drivers.cli import cli

# cli() imports these lazily, so patch them where they are defined.
_APP = 'phrasebook.l4_frameworks_and_drivers.app.LibraryApp'
_LOGGING = 'phrasebook.l4_frameworks_and_drivers.logging_setup.setup_file_logging'


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    p = tmp_path / 'config.yaml'
    p.write_text(
        f'storage:\n  path: "{tmp_path / "templates.json"}"\nlogging:\n  file: "{tmp_path / "phrasebook.log"}"\n',
        encoding='utf-8',
    )
    return p


def _write_store(path: Path) -> None:
    store = TemplateStore(
        templates=[
            Template(id=1, title='Greeting', section='General', body='Hello'),
            Template(id=2, title='Meeting request', section='Work', body='Meet?'),
            Template(id=5, title='Follow up', section='work', body='Any news?'),
        ],
        next_id=6,
    )
    path.write_text(store.to_json(), encoding='utf-8')


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file_is_usage_error(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ['-c', str(tmp_path / 'nope.yaml')])
        assert result.exit_code == 2

    def test_invalid_config_exits_1(self, tmp_path: Path):
        bad = tmp_path / 'bad.yaml'
        bad.write_text('ui:\n  confirm_delete: [1, 2]\n', encoding='utf-8')
        with patch(_LOGGING):
            result = CliRunner().invoke(cli, ['-c', str(bad), '--list'])
        assert result.exit_code == 1
        assert 'Error:' in result.output

    def test_non_mapping_config_exits_1(self, tmp_path: Path):
        bad = tmp_path / 'list.yaml'
        bad.write_text('- storage\n- logging\n', encoding='utf-8')
        with patch(_LOGGING):
            result = CliRunner().invoke(cli, ['-c', str(bad), '--list'])
        assert result.exit_code == 1
        assert 'must be a mapping' in result.output

    def test_list_all(self, config_file: Path, tmp_path: Path):
        _write_store(tmp_path / 'templates.json')
        result = CliRunner().invoke(cli, ['-c', str(config_file), '--list'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert 'Greeting' in lines[0]
        assert '[work]' in lines[2]

    def test_list_by_section(self, config_file: Path, tmp_path: Path):
        _write_store(tmp_path / 'templates.json')
        result = CliRunner().invoke(cli, ['-c', str(config_file), '--list', '-s', 'WORK'])
        assert result.exit_code == 0
        assert 'Meeting request' in result.output
        assert 'Follow up' in result.output
        assert 'Greeting' not in result.output

    def test_list_by_search_and_section(self, config_file: Path, tmp_path: Path):
        _write_store(tmp_path / 'templates.json')
        result = CliRunner().invoke(cli, ['-c', str(config_file), '--list', '-s', 'work', '-k', 'FOLLOW'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['   5  [work]  Follow up']

    def test_list_creates_missing_file(self, config_file: Path, tmp_path: Path):
        result = CliRunner().invoke(cli, ['-c', str(config_file), '--list'])
        assert result.exit_code == 0
        assert 'No templates found.' in result.output
        data = json.loads((tmp_path / 'templates.json').read_text(encoding='utf-8'))
        assert data == {'templates': [], 'nextId': 1}

    def test_data_file_option_overrides_config(self, config_file: Path, tmp_path: Path):
        other = tmp_path / 'other.json'
        _write_store(other)
        result = CliRunner().invoke(cli, ['-c', str(config_file), '-f', str(other), '--list'])
        assert result.exit_code == 0
        assert 'Greeting' in result.output
        assert not (tmp_path / 'templates.json').exists()

    def test_list_with_malformed_file_exits_1(self, config_file: Path, tmp_path: Path):
        (tmp_path / 'templates.json').write_text('{broken', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(config_file), '--list'])
        assert result.exit_code == 1
        assert 'Malformed' in result.output

    def test_tui_launched_with_controller(self, config_file: Path, tmp_path: Path):
        _write_store(tmp_path / 'templates.json')
        with patch(_APP) as mock_app:
            result = CliRunner().invoke(cli, ['-c', str(config_file)])
        assert result.exit_code == 0
        kwargs = mock_app.call_args.kwargs
        assert kwargs['startup_error'] == ''
        assert len(kwargs['controller'].repository.get_all()) == 3
        mock_app.return_value.run.assert_called_once()

    def test_tui_starts_empty_after_load_failure(self, config_file: Path, tmp_path: Path):
        (tmp_path / 'templates.json').write_text('{broken', encoding='utf-8')
        with patch(_APP) as mock_app:
            result = CliRunner().invoke(cli, ['-c', str(config_file)])
        assert result.exit_code == 0
        assert 'Starting with an empty library' in result.output
        kwargs = mock_app.call_args.kwargs
        assert kwargs['startup_error'].startswith('Load failed:')
        assert kwargs['controller'].repository.get_all() == []
        assert (tmp_path / 'templates.json').read_text(encoding='utf-8') == '{broken'
