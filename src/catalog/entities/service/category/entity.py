"""Entity: Category."""

from typing import Any

from pydantic import BaseModel, Field

from src.catalog.entities.core._base import RecordInfo, new_id


class Category(BaseModel):
    """Category a product can be filed under.

    Categories do not know their products; use
    ``ProductRepository.list_by_category`` to find them.
    """

    id: str = Field(default_factory=new_id, description="Unique identifier")
    name: str = Field(description="Name")
    description: str | None = Field(default=None, description="Description")
    record: RecordInfo = Field(default_factory=RecordInfo)

    def __eq__(self, other: Any) -> bool:
        """Compare categories by business attributes, ignoring bookkeeping."""
        if not isinstance(other, Category):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring bookkeeping."""
        return hash((
            self.id,
            self.name,
            self.description,
        ))
