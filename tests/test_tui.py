"""Tests for the Textual presentation layer"""

import pytest
from textual.widgets import Input

from todoedit.core.session import SessionState
from todoedit.core.store import ItemStore
from todoedit.tui.app import TodoEditApp
from todoedit.tui.widgets import TodoRow


def make_app(ids) -> TodoEditApp:
    return TodoEditApp(session=SessionState(store=ItemStore(id_factory=ids)))


def rows(app: TodoEditApp):
    return list(app.screen.query(TodoRow))


@pytest.mark.asyncio
async def test_enter_appends_rows(ids):
    """Test Enter with nothing under edit adds rows"""
    app = make_app(ids)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter", "enter")
        await pilot.pause()

        assert len(app.session.store) == 2
        assert len(rows(app)) == 2
        assert app.session.selected_position is None


@pytest.mark.asyncio
async def test_navigation_marks_selected_row(ids):
    app = make_app(ids)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter", "enter", "j", "j")
        await pilot.pause()

        assert app.session.selected_position == 1
        assert [row.has_class("selected") for row in rows(app)] == [False, True]


@pytest.mark.asyncio
async def test_edit_and_commit(ids):
    """Test i focuses the edit field and Enter commits its text"""
    app = make_app(ids)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter", "down", "i")
        await pilot.pause()

        field = app.screen.query_one("#todo-0", Input)
        assert app.session.editing_id == "item-1"
        assert app.screen.focused is field

        field.value = "Buy milk"
        await pilot.pause()
        assert app.session.snapshot().draft == "Buy milk"

        await pilot.press("enter")
        await pilot.pause()

        assert not app.session.is_editing
        assert app.session.store.get("item-1").title == "Buy milk"
        assert len(app.session.store) == 1  # Enter committed, did not append
        assert not app.screen.query(Input)


@pytest.mark.asyncio
async def test_moving_away_ends_edit(ids):
    app = make_app(ids)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter", "enter", "down", "i")
        await pilot.pause()
        await pilot.press("down")
        await pilot.pause()

        assert not app.session.is_editing
        assert app.session.selected_position == 1
        assert not app.screen.query(Input)


@pytest.mark.asyncio
async def test_escape_closes_window(ids):
    """Test Escape turns into an exit request"""
    app = make_app(ids)
    exits = []
    async with app.run_test() as pilot:
        await pilot.pause()
        app.exit = lambda *args, **kwargs: exits.append(args)
        await pilot.press("escape")
        await pilot.pause()
        del app.exit

        assert exits == [()]


@pytest.mark.asyncio
async def test_add_button(ids):
    app = make_app(ids)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.click("#add-todo")
        await pilot.pause()

        assert len(app.session.store) == 1
        assert len(rows(app)) == 1
