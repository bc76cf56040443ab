"""Input dispatcher - classify raw events into intents"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from todoedit.core.session import SessionState
from todoedit.models.intent import Intent, KeyPress, PointerActivation

logger = logging.getLogger(__name__)

InputEvent = Union[KeyPress, PointerActivation]

# Enter is resolved against the edit state, see InputDispatcher.classify
CONFIRM_KEY = "enter"

KEYMAP: Dict[str, Intent] = {
    "up": Intent.MOVE_UP,
    "k": Intent.MOVE_UP,
    "down": Intent.MOVE_DOWN,
    "j": Intent.MOVE_DOWN,
    "i": Intent.BEGIN_EDIT,
    "escape": Intent.REQUEST_EXIT,
}


def key_table() -> List[Tuple[str, str]]:
    """(keys, description) rows describing the bindings"""
    return [
        ("Up / k", "Move selection up"),
        ("Down / j", "Move selection down"),
        ("i", "Edit the selected item"),
        ("Enter", "Commit the edit, or append a new item when not editing"),
        ("Escape", "Quit"),
        ("Click", "Edit the clicked item, or commit it if already editing"),
    ]


class InputDispatcher:
    """Turns key presses and pointer activations into session transitions"""

    def __init__(self, session: SessionState):
        self.session = session

    def classify(self, key: str) -> Optional[Intent]:
        """Map a Textual key name to an intent, or None if the key is unbound"""
        if key == CONFIRM_KEY:
            return Intent.COMMIT_EDIT if self.session.is_editing else Intent.APPEND_ITEM
        return KEYMAP.get(key)

    def dispatch(self, event: InputEvent) -> Optional[Intent]:
        """Forward an event to the session.

        Returns the intent that was forwarded, or None when the event was
        ignored.
        """
        if isinstance(event, PointerActivation):
            if self.session.editing_id == event.item_id:
                intent = Intent.COMMIT_EDIT
            else:
                intent = Intent.BEGIN_EDIT
            self.session.activate(event.item_id)
            return intent

        intent = self.classify(event.key)
        if intent is None:
            return None
        logger.debug("Key %r -> %s", event.key, intent.value)
        self.forward(intent)
        return intent

    def forward(self, intent: Intent) -> bool:
        return self.session.apply(intent)
