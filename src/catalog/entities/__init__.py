"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core._base import EntityState, RecordInfo
from .service.category import Category, CategoryRepository, CategoryTable
from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "EntityState",
    "RecordInfo",
    "Category",
    "CategoryTable",
    "CategoryRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
]
