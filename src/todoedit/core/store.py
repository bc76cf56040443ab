"""Item store - ordered, uniquely identified todo items"""

import logging
import uuid
from typing import Callable, Iterator, List, Optional

from todoedit.models.item import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PRIORITY,
    DEFAULT_TITLE,
    Item,
)

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def uuid_ids() -> str:
    """Default id source: random UUID4 text"""
    return str(uuid.uuid4())


class ItemStore:
    """Items in display order.

    Positions shift as the list changes, ids do not, so every write goes
    through an id. Fresh ids come from ``id_factory`` so tests can supply
    deterministic ones.
    """

    def __init__(
        self,
        id_factory: IdFactory = uuid_ids,
        default_title: str = DEFAULT_TITLE,
        default_description: str = DEFAULT_DESCRIPTION,
        default_priority: int = DEFAULT_PRIORITY,
    ):
        self._id_factory = id_factory
        self._items: List[Item] = []
        self.default_title = default_title
        self.default_description = default_description
        self.default_priority = default_priority

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def append(self) -> str:
        """Append a new item with default text and return its id"""
        item_id = self._id_factory()
        if self.position_of(item_id) is not None:
            raise ValueError(f"Duplicate item id: {item_id}")

        self._items.append(
            Item(
                id=item_id,
                title=self.default_title,
                description=self.default_description,
                priority=self.default_priority,
            )
        )
        logger.debug("Appended item %s at position %d", item_id, len(self._items) - 1)
        return item_id

    def set_title(self, item_id: str, text: str) -> bool:
        """Overwrite the title of an item. Unknown ids are ignored."""
        item = self.get(item_id)
        if item is None:
            logger.warning("Ignoring title write to unknown item %s", item_id)
            return False
        item.title = text
        return True

    def get(self, item_id: str) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def position_of(self, item_id: str) -> Optional[int]:
        for position, item in enumerate(self._items):
            if item.id == item_id:
                return position
        return None

    def id_at(self, position: Optional[int]) -> Optional[str]:
        if position is None or not 0 <= position < len(self._items):
            return None
        return self._items[position].id
