"""Data models for todoedit"""

from todoedit.models.config import TodoEditConfig
from todoedit.models.intent import (
    CloseWindow,
    FocusField,
    Intent,
    KeyPress,
    PointerActivation,
)
from todoedit.models.item import Item, ItemView
from todoedit.models.snapshot import Snapshot

__all__ = [
    "CloseWindow",
    "FocusField",
    "Intent",
    "Item",
    "ItemView",
    "KeyPress",
    "PointerActivation",
    "Snapshot",
    "TodoEditConfig",
]
