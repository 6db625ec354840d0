"""
Pydantic models for shopping cart rows.

A cart row is unique per (user, product) pair; see
``CartService.add_to_cart`` for the merge rule.  ``CartItemWithProduct``
is the stitched form returned by cart listings: the product is
embedded when it still exists and ``None`` otherwise.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel
from .product import ProductRead


class CartItemBase(CamelModel):
    user_id: int = Field(..., examples=[1])
    product_id: int = Field(..., examples=[3])
    quantity: int = Field(1, ge=1, examples=[1])


class CartItemCreate(CartItemBase):
    """Schema for adding a product to a cart."""
    pass


class CartItemUpdate(CamelModel):
    """Schema for setting the absolute quantity of a cart row."""

    quantity: int = Field(..., ge=1, examples=[2])


class CartItemRead(CartItemBase):
    id: int


class CartItemWithProduct(CartItemRead):
    product: Optional[ProductRead] = None
