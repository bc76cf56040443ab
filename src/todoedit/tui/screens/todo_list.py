"""Todo list screen - renders the session and feeds it input"""

import logging

from textual import events
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Static

from todoedit.core.dispatcher import InputDispatcher
from todoedit.core.session import SessionState
from todoedit.models.intent import (
    CloseWindow,
    FocusField,
    Intent,
    KeyPress,
    PointerActivation,
)
from todoedit.tui.widgets import TodoRow, field_id

logger = logging.getLogger(__name__)


class TodoList(VerticalScroll):
    """Scrolling column of rows. Never takes focus so keys reach the screen."""

    can_focus = False


class TodoListScreen(Screen):
    """Screen showing the todo list.

    The screen holds no interaction state of its own. Every key press goes
    through the dispatcher; after a transition fires, the rows are rebuilt
    from a fresh snapshot and any directives the session queued are run.

    Controls:
    - Up/k, Down/j: Move selection
    - i: Edit selected item
    - Enter: Commit edit, or append a new item
    - Escape: Quit
    """

    AUTO_FOCUS = None

    def __init__(self, session: SessionState, heading: str = "icedtodo"):
        super().__init__()
        self.session = session
        self.dispatcher = InputDispatcher(session)
        self.heading = heading

    def compose(self) -> ComposeResult:
        yield Static(f"[bold]{self.heading}[/bold]", id="header")
        yield Static(
            "[dim]↑/k ↓/j[/] navigate  [dim]i[/] edit  [dim]Enter[/] commit/add  [dim]Esc[/] quit",
            id="help",
        )
        yield TodoList(id="todo-list")
        yield Button("+", id="add-todo")
        yield Footer()

    async def on_mount(self) -> None:
        self.query_one("#add-todo", Button).can_focus = False
        await self.refresh_rows()

    # ========== Rendering ==========

    async def refresh_rows(self) -> None:
        """Rebuild every row from the current snapshot"""
        snapshot = self.session.snapshot()
        todo_list = self.query_one("#todo-list", TodoList)

        await todo_list.remove_children()
        rows = [
            TodoRow(
                item,
                position,
                selected=snapshot.is_selected(position),
                editing=snapshot.is_editing(item.id),
                draft=snapshot.draft,
            )
            for position, item in enumerate(snapshot.items)
        ]
        if rows:
            await todo_list.mount_all(rows)

        if snapshot.selected_position is not None:
            todo_list.scroll_to_widget(rows[snapshot.selected_position], animate=False)

    def run_directives(self) -> None:
        for directive in self.session.drain_directives():
            logger.debug("Running directive %s", directive)
            if isinstance(directive, FocusField):
                self.query_one(f"#{field_id(directive.position)}", Input).focus()
            elif isinstance(directive, CloseWindow):
                self.app.exit()

    async def _after_transition(self) -> None:
        await self.refresh_rows()
        self.run_directives()

    # ========== Input ==========

    async def on_key(self, event: events.Key) -> None:
        # Enter inside the edit field arrives as Input.Submitted
        if event.key == "enter" and isinstance(self.focused, Input):
            return

        intent = self.dispatcher.dispatch(KeyPress(event.key))
        if intent is None:
            return

        event.stop()
        event.prevent_default()
        await self._after_transition()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dispatcher.dispatch(KeyPress("enter"))
        await self._after_transition()

    def on_input_changed(self, event: Input.Changed) -> None:
        # Fields from a finished edit can still report changes while being removed
        if self.session.is_editing:
            self.session.update_draft(event.value)

    async def on_todo_row_activated(self, event: TodoRow.Activated) -> None:
        self.dispatcher.dispatch(PointerActivation(event.item_id))
        await self._after_transition()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-todo":
            self.dispatcher.forward(Intent.APPEND_ITEM)
            await self._after_transition()
