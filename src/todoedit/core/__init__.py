"""Core functionality for todoedit"""

from todoedit.core.config import load_config, save_config, create_config, config_exists
from todoedit.core.dispatcher import InputDispatcher
from todoedit.core.editing import EditController, EditContractError, Editing, Idle
from todoedit.core.selection import SelectionTracker
from todoedit.core.session import SessionState
from todoedit.core.store import ItemStore

__all__ = [
    "load_config",
    "save_config",
    "create_config",
    "config_exists",
    "InputDispatcher",
    "EditController",
    "EditContractError",
    "Editing",
    "Idle",
    "SelectionTracker",
    "SessionState",
    "ItemStore",
]
