"""CLI entry point for phrasebook."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from phrasebook import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-f',
    '--data-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Template JSON file (overrides storage.path).',
)
@click.option('--list', 'list_only', is_flag=True, help='Print templates and exit (no TUI).')
@click.option('-s', '--section', default=None, help='With --list: only this section (case-insensitive).')
@click.option('-k', '--search', 'keyword', default=None, help='With --list: title keyword (case-insensitive).')
@click.version_option(version=__version__)
def cli(config_path, data_file, list_only, section, keyword):
    """phrasebook -- keep, search, and copy reusable text templates."""
    from phrasebook.l1_entities.errors import PersistenceError  # noqa: PLC0415 -- deferred: not needed for --help
    from phrasebook.l4_frameworks_and_drivers.config import build_app_config  # noqa: PLC0415 -- deferred: not needed for --help
    from phrasebook.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )
    from phrasebook.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    try:
        overrides: dict = {}
        if data_file:
            overrides['storage'] = {'path': data_file}
        raw = DependencyContainer.config_loader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_file_logging(Path(config.logging.file).expanduser(), config.logging.level)

    container = DependencyContainer(config)
    startup_error = ''
    try:
        container.repository.load()
    except PersistenceError as e:
        if list_only:
            click.echo(f'Error: {e}', err=True)
            sys.exit(1)
        startup_error = f'Load failed: {e}'
        click.echo(f'Warning: {startup_error}. Starting with an empty library.', err=True)

    if list_only:
        _print_templates(container.repository, section, keyword)
        return

    from phrasebook.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or --list
        LibraryApp,
    )

    app = LibraryApp(controller=container.controller, ui=config.ui, startup_error=startup_error)
    app.run()


def _print_templates(repository, section: str | None, keyword: str | None) -> None:
    templates = repository.get_by_section(section) if section else repository.get_all()
    if keyword and keyword.strip():
        wanted = {t.id for t in repository.search(keyword)}
        templates = [t for t in templates if t.id in wanted]
    if not templates:
        click.echo('No templates found.')
        return
    for tmpl in templates:
        click.echo(f'{tmpl.id:>4}  [{tmpl.section}]  {tmpl.title}')
