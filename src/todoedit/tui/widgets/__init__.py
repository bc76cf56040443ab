"""Widgets for todoedit"""

from todoedit.tui.widgets.todo_row import TodoRow, field_id

__all__ = ["TodoRow", "field_id"]
