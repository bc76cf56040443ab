"""Main Textual application for todoedit"""

from typing import Optional

from textual.app import App

from todoedit.core.session import SessionState
from todoedit.models.config import TodoEditConfig
from todoedit.tui.screens import TodoListScreen


class TodoEditApp(App):
    """Main todoedit TUI application"""

    TITLE = "icedtodo"
    CSS = """
    Screen {
        background: $surface;
    }

    #header {
        padding: 1 2;
        color: $primary;
    }

    #help {
        color: $text-muted;
        padding: 0 2;
    }

    #todo-list {
        height: 1fr;
        margin: 1 2;
        border: solid $primary;
    }

    #add-todo {
        margin: 0 2 1 2;
    }

    Footer {
        background: $surface-darken-1;
    }
    """

    def __init__(
        self,
        session: Optional[SessionState] = None,
        config: Optional[TodoEditConfig] = None,
    ):
        super().__init__()
        self.todo_config = config or TodoEditConfig()
        self.session = session or SessionState.from_config(self.todo_config)
        self.title = self.todo_config.title

    def on_mount(self) -> None:
        """Start with the list screen"""
        self.push_screen(TodoListScreen(self.session, heading=self.todo_config.title))
