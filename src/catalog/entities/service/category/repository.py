from sqlmodel import Session, select

from src.catalog.entities.core._base import utcnow
from src.catalog.entities.service.category.entity import Category
from src.catalog.entities.service.category.table import CategoryTable


def category_from_row(row: CategoryTable) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        record=row.record_info(),
    )


class CategoryRepository:
    """Data-access layer for categories."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, category_id: str) -> Category | None:
        row = self._session.get(CategoryTable, category_id)
        if row is None:
            return None
        return category_from_row(row)

    def get_rows(self, category_ids: set[str]) -> dict[str, CategoryTable]:
        """Load several category rows at once, keyed by identifier."""
        if not category_ids:
            return {}
        statement = select(CategoryTable).where(CategoryTable.id.in_(category_ids))
        return {row.id: row for row in self._session.exec(statement)}

    def list_all(self) -> list[Category]:
        rows = self._session.exec(select(CategoryTable)).all()
        return [category_from_row(row) for row in rows]

    def exists(self, category_id: str) -> bool:
        return self._session.get(CategoryTable, category_id) is not None

    def save(self, category: Category) -> Category:
        """Insert or update by primary key and commit."""
        row = self._session.get(CategoryTable, category.id)
        if row is None:
            row = CategoryTable(
                id=category.id,
                name=category.name,
                description=category.description,
                state=category.record.state,
            )
            self._session.add(row)
        else:
            row.name = category.name
            row.description = category.description
            row.state = category.record.state
            row.updated_at = utcnow()

        self._session.commit()
        self._session.refresh(row)
        return category_from_row(row)

    def delete(self, category_id: str) -> bool:
        row = self._session.get(CategoryTable, category_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True
