"""Session state - the aggregate every interaction mutates"""

import logging
from typing import Callable, List, Optional, Union

from todoedit.core.editing import EditController
from todoedit.core.selection import SelectionTracker
from todoedit.core.store import IdFactory, ItemStore, uuid_ids
from todoedit.models.config import TodoEditConfig
from todoedit.models.intent import CloseWindow, FocusField, Intent
from todoedit.models.item import ItemView
from todoedit.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

Directive = Union[FocusField, CloseWindow]


class SessionState:
    """Owns the item store, selection and edit controller for one run.

    All mutations go through ``_transition``, which applies the change,
    repairs the selection against the store length and then drops edit
    mode if the selected item is no longer the one being edited. Methods
    return True when their transition fired.

    Side effects for the presentation layer (focusing an edit field,
    closing the window) are queued as directives and collected with
    ``drain_directives``.
    """

    def __init__(
        self,
        store: Optional[ItemStore] = None,
        selection: Optional[SelectionTracker] = None,
        editor: Optional[EditController] = None,
    ):
        self.store = store if store is not None else ItemStore()
        self.selection = selection if selection is not None else SelectionTracker()
        self.editor = editor if editor is not None else EditController()
        self._directives: List[Directive] = []

    @classmethod
    def from_config(cls, config: TodoEditConfig, id_factory: IdFactory = uuid_ids) -> "SessionState":
        """Build a session using the item defaults and contract mode from config"""
        store = ItemStore(
            id_factory=id_factory,
            default_title=config.default_title,
            default_description=config.default_description,
            default_priority=config.default_priority,
        )
        return cls(store=store, editor=EditController(strict=config.strict_contracts))

    # ========== Read-only view ==========

    @property
    def selected_position(self) -> Optional[int]:
        return self.selection.position

    @property
    def selected_id(self) -> Optional[str]:
        return self.store.id_at(self.selection.position)

    @property
    def editing_id(self) -> Optional[str]:
        return self.editor.editing_id

    @property
    def is_editing(self) -> bool:
        return self.editor.is_editing

    def snapshot(self) -> Snapshot:
        return Snapshot(
            items=tuple(ItemView.of(item) for item in self.store),
            selected_position=self.selection.position,
            editing_id=self.editor.editing_id,
            draft=self.editor.draft,
        )

    def drain_directives(self) -> List[Directive]:
        """Return pending directives in emission order and forget them"""
        directives, self._directives = self._directives, []
        return directives

    # ========== Transitions ==========

    def _transition(self, change: Callable[[], bool]) -> bool:
        fired = change()
        self.selection.reconcile(len(self.store))
        self.editor.revalidate(self.selected_id)
        return fired

    def move_up(self) -> bool:
        return self._transition(lambda: self._move(self.selection.move_up))

    def move_down(self) -> bool:
        return self._transition(lambda: self._move(self.selection.move_down))

    def _move(self, step: Callable[[int], None]) -> bool:
        before = self.selection.position
        step(len(self.store))
        return self.selection.position != before

    def append_item(self) -> bool:
        return self._transition(self._append)

    def _append(self) -> bool:
        self.store.append()
        return True

    def begin_edit_current(self) -> bool:
        """Edit the selected item. Needs a selection and no edit in progress."""
        return self._transition(self._begin_selected)

    def _begin_selected(self) -> bool:
        position = self.selection.position
        item_id = self.store.id_at(position)
        if item_id is None or self.editor.is_editing:
            return False
        self.editor.begin(item_id, self.store.get(item_id).title)
        self._directives.append(FocusField(position=position))
        return True

    def commit_edit(self) -> bool:
        return self._transition(lambda: self.editor.commit(self.store))

    def update_draft(self, text: str) -> bool:
        return self.editor.update_draft(text)

    def activate(self, item_id: str) -> bool:
        """Pointer activation of a row.

        Clicking the item under edit commits it; clicking any other item
        selects it and begins editing it.
        """
        if self.editor.editing_id == item_id:
            return self.commit_edit()

        position = self.store.position_of(item_id)
        if position is None:
            logger.warning("Ignoring activation of unknown item %s", item_id)
            return False

        self._transition(lambda: self.selection.select(position, len(self.store)))
        return self.begin_edit_current()

    def request_exit(self) -> bool:
        self._directives.append(CloseWindow())
        return True

    def apply(self, intent: Intent) -> bool:
        """Run the transition for an intent"""
        handlers = {
            Intent.MOVE_UP: self.move_up,
            Intent.MOVE_DOWN: self.move_down,
            Intent.BEGIN_EDIT: self.begin_edit_current,
            Intent.COMMIT_EDIT: self.commit_edit,
            Intent.APPEND_ITEM: self.append_item,
            Intent.REQUEST_EXIT: self.request_exit,
        }
        fired = handlers[intent]()
        logger.debug("Intent %s fired=%s", intent.value, fired)
        return fired
