"""Intents, input events and outbound directives"""

from dataclasses import dataclass
from enum import Enum


class Intent(str, Enum):
    """Input-source-agnostic actions the session understands"""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    BEGIN_EDIT = "begin_edit"
    COMMIT_EDIT = "commit_edit"
    APPEND_ITEM = "append_item"
    REQUEST_EXIT = "request_exit"


# Inbound events


@dataclass(frozen=True)
class KeyPress:
    """A key press, named the way Textual names keys ("up", "enter", "j")"""
    key: str


@dataclass(frozen=True)
class PointerActivation:
    """The user clicked the row showing this item"""
    item_id: str


# Outbound directives


@dataclass(frozen=True)
class FocusField:
    """Move input focus to the edit field of the row at this position"""
    position: int


@dataclass(frozen=True)
class CloseWindow:
    """Close the application window"""
