"""
Business logic for shopping carts.

A user holds at most one cart row per product.  Adding a product that
is already in the cart sums the quantities into the existing row,
which keeps its id; updating a row sets an absolute quantity.  Both
paths refuse quantities below one before touching the table.

Cart listings are stitched with the current product record (see
``core.stitching.attach_products``).
"""

import logging
from typing import List, Optional

from ..core.errors import InvalidQuantityError
from ..core.stitching import attach_product, attach_products
from ..core.store import Store
from ..schemas.cart import CartItemRead, CartItemWithProduct


logger = logging.getLogger(__name__)


def _check_quantity(quantity: int) -> None:
    if quantity < 1:
        raise InvalidQuantityError(quantity)


class CartService:
    """Service for per‑user shopping carts."""

    def __init__(self, store: Store) -> None:
        self.cart_items = store.cart_items
        self.products = store.products

    def get_cart_items(self, user_id: int) -> List[CartItemRead]:
        return self.cart_items.list(lambda item: item.user_id == user_id)

    def list_cart(self, user_id: int) -> List[CartItemWithProduct]:
        """Return the user's cart rows, each with its product embedded."""
        return attach_products(self.get_cart_items(user_id), self.products)

    def get_cart_item(self, user_id: int, product_id: int) -> Optional[CartItemRead]:
        return self.cart_items.find(lambda item: item.user_id == user_id and item.product_id == product_id)

    def with_product(self, item: CartItemRead) -> CartItemWithProduct:
        return attach_product(item, self.products)

    def add_to_cart(self, user_id: int, product_id: int, quantity: int = 1) -> CartItemRead:
        """Add ``quantity`` units of a product to the user's cart.

        Raises
        ------
        InvalidQuantityError
            If ``quantity`` is below one.
        """
        _check_quantity(quantity)
        existing = self.get_cart_item(user_id, product_id)
        if existing is not None:
            merged = self.cart_items.update(existing.id, {"quantity": existing.quantity + quantity})
            logger.info("User %s cart row %s now holds %s units", user_id, existing.id, merged.quantity)
            return merged
        item = self.cart_items.create({"user_id": user_id, "product_id": product_id, "quantity": quantity})
        logger.info("User %s added product %s to cart (row %s)", user_id, product_id, item.id)
        return item

    def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItemRead]:
        """Set the quantity of a cart row; ``None`` if the row is unknown."""
        _check_quantity(quantity)
        return self.cart_items.update(item_id, {"quantity": quantity})

    def remove_from_cart(self, item_id: int) -> bool:
        return self.cart_items.delete(item_id)

    def clear_cart(self, user_id: int) -> int:
        """Remove every row of the user's cart; return how many were removed."""
        removed = self.cart_items.delete_where(lambda item: item.user_id == user_id)
        logger.info("Cleared %d cart rows for user %s", removed, user_id)
        return removed
