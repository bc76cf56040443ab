"""Edit-mode controller - which item, if any, is being edited"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from todoedit.core.store import ItemStore

logger = logging.getLogger(__name__)


class EditContractError(Exception):
    """Raised when edit text arrives while no item is being edited"""

    pass


@dataclass(frozen=True)
class Idle:
    """Not editing"""


@dataclass(frozen=True)
class Editing:
    """Editing ``item_id``; ``draft`` is the text typed so far"""
    item_id: str
    draft: str


EditState = Union[Idle, Editing]

IDLE = Idle()


class EditController:
    """State machine with the two shapes Idle and Editing(id).

    The controller trusts its caller for the id passed to ``begin``; the
    session always takes it from the current selection, and calls
    ``revalidate`` after every selection change so an edit never follows
    the cursor to another item.
    """

    def __init__(self, strict: bool = False):
        self.state: EditState = IDLE
        self.strict = strict

    @property
    def is_editing(self) -> bool:
        return isinstance(self.state, Editing)

    @property
    def editing_id(self) -> Optional[str]:
        if isinstance(self.state, Editing):
            return self.state.item_id
        return None

    @property
    def draft(self) -> Optional[str]:
        if isinstance(self.state, Editing):
            return self.state.draft
        return None

    def begin(self, item_id: str, title: str) -> bool:
        """Idle -> Editing(item_id), with the current title as the draft"""
        if self.is_editing:
            return False
        self.state = Editing(item_id=item_id, draft=title)
        logger.debug("Editing todo: %s", item_id)
        return True

    def commit(self, store: ItemStore, text: Optional[str] = None) -> bool:
        """Editing(id) -> Idle, writing the draft (or ``text``) into the store"""
        if not isinstance(self.state, Editing):
            return False
        item_id = self.state.item_id
        store.set_title(item_id, self.state.draft if text is None else text)
        self.state = IDLE
        logger.debug("Finished editing todo: %s", item_id)
        return True

    def update_draft(self, text: str) -> bool:
        if not isinstance(self.state, Editing):
            if self.strict:
                raise EditContractError("No todo is being edited")
            logger.warning("Ignoring edit text while no todo is being edited")
            return False
        self.state = replace(self.state, draft=text)
        return True

    def revalidate(self, selected_id: Optional[str]) -> bool:
        """Leave edit mode if the selection no longer points at the edited item.

        Returns True when this dropped an edit.
        """
        if isinstance(self.state, Editing) and self.state.item_id != selected_id:
            logger.debug("Selection left %s, leaving edit mode", self.state.item_id)
            self.state = IDLE
            return True
        return False
