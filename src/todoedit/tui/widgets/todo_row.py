"""Row widget showing one todo item"""

from typing import Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label

from todoedit.models.item import ItemView


def field_id(position: int) -> str:
    """DOM id of the edit field for the row at a position"""
    return f"todo-{position}"


class RowLabel(Label):
    """Clickable label that activates the row it belongs to"""

    def __init__(self, text: str, item_id: str, **kwargs):
        super().__init__(text, markup=False, **kwargs)
        self.item_id = item_id

    def on_click(self) -> None:
        self.post_message(TodoRow.Activated(self.item_id))


class TodoRow(Widget):
    """A todo item, rendered as its title or as an edit field"""

    DEFAULT_CSS = """
    TodoRow {
        height: auto;
        padding: 0 1;
    }

    TodoRow.selected {
        background: $accent 30%;
    }

    TodoRow.selected:hover {
        background: $accent 50%;
    }

    TodoRow Input {
        width: 1fr;
    }

    TodoRow .commit-mark {
        color: $text-muted;
        padding: 0 1;
    }
    """

    class Activated(Message):
        """Posted when the user clicks a row"""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    def __init__(
        self,
        item: ItemView,
        position: int,
        selected: bool = False,
        editing: bool = False,
        draft: Optional[str] = None,
    ):
        super().__init__(classes="selected" if selected else "")
        self.item = item
        self.position = position
        self.editing = editing
        self.draft = draft

    def compose(self) -> ComposeResult:
        if self.editing:
            value = self.draft if self.draft is not None else self.item.title
            yield Input(value=value, placeholder="Type here", id=field_id(self.position))
            yield RowLabel("✓ done", self.item.id, classes="commit-mark")
        else:
            yield RowLabel(self.item.title, self.item.id)
