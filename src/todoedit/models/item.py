"""Item model - a single editable entry in the list"""

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TITLE = "New Todo"
DEFAULT_DESCRIPTION = "New Todo Description"
DEFAULT_PRIORITY = 0


class Item(BaseModel):
    """A todo item, identified by an id that never changes"""
    id: str = Field(..., frozen=True, description="Opaque unique identifier")
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION

    # Reserved, nothing mutates it yet
    priority: int = DEFAULT_PRIORITY


class ItemView(BaseModel):
    """Read-only copy of an item for rendering"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    priority: int

    @classmethod
    def of(cls, item: Item) -> "ItemView":
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            priority=item.priority,
        )
