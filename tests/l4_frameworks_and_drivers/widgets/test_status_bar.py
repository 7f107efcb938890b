"""Tests for StatusBar — rendering of message, counts, filter, and hints."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult

from phrasebook.l4_frameworks_and_drivers.widgets.status_bar import StatusBar


class BarHost(App[None]):
    def compose(self) -> ComposeResult:
        yield StatusBar(id='status-bar')


class TestStatusBar:
    @pytest.mark.asyncio
    async def test_default_render(self):
        app = BarHost()
        async with app.run_test() as pilot:
            await pilot.pause()
            bar = app.query_one(StatusBar)
            assert bar.render() == 'Ready │ 0/0'

    @pytest.mark.asyncio
    async def test_counts_and_filter(self):
        app = BarHost()
        async with app.run_test() as pilot:
            bar = app.query_one(StatusBar)
            bar.message = 'Search results: 2'
            bar.shown = 2
            bar.total = 5
            bar.filter_label = 'search: meet'
            await pilot.pause()
            assert bar.render() == 'Search results: 2 │ 2/5 │ search: meet'

    @pytest.mark.asyncio
    async def test_hints_right_aligned_when_room(self):
        app = BarHost()
        async with app.run_test(size=(120, 10)) as pilot:
            bar = app.query_one(StatusBar)
            bar.keybinding_hints = r'\[q] quit'
            await pilot.pause()
            rendered = bar.render()
            assert rendered.startswith('Ready │ 0/0')
            assert rendered.endswith(r'\[q] quit')

    @pytest.mark.asyncio
    async def test_hints_dropped_when_narrow(self):
        app = BarHost()
        async with app.run_test(size=(20, 10)) as pilot:
            bar = app.query_one(StatusBar)
            bar.keybinding_hints = r'\[/] search  \[n] new  \[q] quit'
            await pilot.pause()
            assert 'quit' not in bar.render()

    @pytest.mark.asyncio
    async def test_error_class_toggles(self):
        app = BarHost()
        async with app.run_test() as pilot:
            bar = app.query_one(StatusBar)
            bar.is_error = True
            await pilot.pause()
            assert bar.has_class('-error')
            bar.is_error = False
            await pilot.pause()
            assert not bar.has_class('-error')

    @pytest.mark.asyncio
    async def test_markup_in_message_is_escaped(self):
        app = BarHost()
        async with app.run_test() as pilot:
            bar = app.query_one(StatusBar)
            bar.message = 'Added "a[/]b [bold]"'
            bar.filter_label = 'search: [/]'
            await pilot.pause()
            assert bar.render() == r'Added "a\[/]b \[bold]" │ 0/0 │ search: \[/]'
