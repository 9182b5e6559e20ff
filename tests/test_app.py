"""Tests for the Textual host in tablux/tui/app.py."""

from __future__ import annotations

import asyncio

from conftest import PEOPLE_CSV, SCENARIO_JSON, write_file
from tablux.config import Settings
from tablux.data_formats import STDIN_SOURCE
from tablux.tui.app import TabluxApp
from tablux.tui.controller import TABLE_HELP, ViewerKind, controls_help


async def _settle(app: TabluxApp, pilot) -> None:
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


def test_loads_file_and_handles_keys(tmp_path):
    path = write_file(tmp_path, "data.json", SCENARIO_JSON)

    async def scenario():
        app = TabluxApp(source=str(path))
        async with app.run_test(size=(100, 30)) as pilot:
            await _settle(app, pilot)
            state = app.panel.state
            assert state.viewer_kind is ViewerKind.TREE
            assert state.tree_viewer.viewport_height == 26
            assert app.title == "Tablux - data.json (json)"

            await pilot.press("down", "down", "enter")
            assert app.panel.state.tree_viewer.cursor == 2
            assert not app.panel.state.tree_viewer.current_node.expanded

    asyncio.run(scenario())


def test_preloaded_stdin_data_shows_table():
    async def scenario():
        app = TabluxApp(source=STDIN_SOURCE, settings=Settings(), data=PEOPLE_CSV)
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(app, pilot)
            assert app.panel.state.viewer_kind is ViewerKind.TABLE
            assert controls_help(app.panel.state).plain == TABLE_HELP

            await pilot.press("right", "s")
            assert app.panel.state.table_viewer.data.rows[0] == ["bob", "25"]

    asyncio.run(scenario())


def test_load_failure_is_shown(tmp_path):
    async def scenario():
        app = TabluxApp(source=str(tmp_path / "missing.json"))
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            state = app.panel.state
            assert state.error_message.startswith("Error: Cannot read")
            assert not state.accepts_input

            await pilot.press("q")
            assert app.panel.state.should_quit

    asyncio.run(scenario())
