"""Business logic for product categories."""

import logging
from typing import List, Optional

from ..core.store import Store
from ..schemas.category import CategoryCreate, CategoryRead


class CategoryService:
    """Categories are listed in creation order.

    Deleting a category is not supported; products keep their
    ``categoryId`` regardless.
    """

    def __init__(self, store: Store) -> None:
        self.categories = store.categories

    def list_categories(self) -> List[CategoryRead]:
        return self.categories.list()

    def get_category(self, category_id: int) -> Optional[CategoryRead]:
        return self.categories.get(category_id)

    def create_category(self, data: CategoryCreate) -> CategoryRead:
        category = self.categories.create(data)
        logging.getLogger(__name__).info("Created category %s (%s)", category.id, category.name)
        return category
