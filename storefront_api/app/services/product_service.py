"""
Business logic for products.

Listing delegates to the filter/sort engine in ``core.query``; every
price comparison there goes through ``effective_price`` so filtering
and sorting always agree on what a product costs.
"""

import logging
from typing import List, Optional

from ..core.query import query_products
from ..core.store import Store
from ..schemas.product import ProductCreate, ProductFilters, ProductRead, ProductUpdate


logger = logging.getLogger(__name__)


class ProductService:
    """Service for the product catalog."""

    def __init__(self, store: Store) -> None:
        self.products = store.products

    def list_products(self, filters: Optional[ProductFilters] = None) -> List[ProductRead]:
        """Return products matching ``filters``.

        Without filters all products are returned in insertion order.
        """
        return query_products(self.products.list(), filters)

    def list_products_by_category(self, category_id: int) -> List[ProductRead]:
        return self.products.list(lambda p: p.category_id == category_id)

    def get_product(self, product_id: int) -> Optional[ProductRead]:
        return self.products.get(product_id)

    def create_product(self, data: ProductCreate) -> ProductRead:
        product = self.products.create(data)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update_product(self, product_id: int, data: ProductUpdate) -> Optional[ProductRead]:
        product = self.products.update(product_id, data)
        if product is not None:
            logger.info("Updated product %s", product_id)
        return product

    def delete_product(self, product_id: int) -> bool:
        """Remove a product.

        Cart rows that reference it stay in place and are listed with no
        embedded product.
        """
        deleted = self.products.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", product_id)
        return deleted
