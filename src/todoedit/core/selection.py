"""Selection tracker - at most one highlighted position"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class SelectionTracker:
    """Holds an optional index into the item store.

    The tracker never sees the store itself, only its length, and keeps
    ``0 <= position < length`` whenever a position is present.
    """

    def __init__(self) -> None:
        self._position: Optional[int] = None

    @property
    def position(self) -> Optional[int]:
        return self._position

    def move_up(self, length: int) -> None:
        """Move towards the top, stopping at 0"""
        if length == 0:
            return
        if self._position is None:
            self._position = 0
        else:
            self._position = max(self._position - 1, 0)
        logger.debug("Selected index: %s", self._position)

    def move_down(self, length: int) -> None:
        """Move towards the bottom, stopping at the last item"""
        if length == 0:
            return
        if self._position is None:
            self._position = 0
        else:
            self._position = min(self._position + 1, length - 1)
        logger.debug("Selected index: %s", self._position)

    def select(self, position: int, length: int) -> bool:
        """Select a position directly. Out-of-range positions are ignored."""
        if not 0 <= position < length:
            return False
        self._position = position
        logger.debug("Selected index: %s", self._position)
        return True

    def clear(self) -> None:
        self._position = None

    def reconcile(self, length: int) -> None:
        """Drop the selection if the store no longer reaches it"""
        if self._position is not None and self._position >= length:
            logger.debug("Selection %d out of range for %d items, clearing", self._position, length)
            self._position = None
