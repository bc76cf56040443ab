"""TUI screens for todoedit"""

from todoedit.tui.screens.todo_list import TodoListScreen

__all__ = ["TodoListScreen"]
