"""Category database table model."""

from src.catalog.entities.core._base import RecordTable


class CategoryTable(RecordTable, table=True):
    """Database persistence model for categories.

    This represents how the Category entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "category"

    name: str
    description: str | None = None
