"""Snapshot model - immutable view of the session handed to the renderer"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from todoedit.models.item import ItemView


class Snapshot(BaseModel):
    """Everything the presentation layer needs to draw one frame"""
    model_config = ConfigDict(frozen=True)

    items: Tuple[ItemView, ...] = ()
    selected_position: Optional[int] = None
    editing_id: Optional[str] = None
    draft: Optional[str] = None

    @property
    def editing_position(self) -> Optional[int]:
        """Position of the item under edit, if any"""
        if self.editing_id is None:
            return None
        for position, item in enumerate(self.items):
            if item.id == self.editing_id:
                return position
        return None

    def is_selected(self, position: int) -> bool:
        return self.selected_position == position

    def is_editing(self, item_id: str) -> bool:
        return self.editing_id == item_id
