"""
Pydantic models for products and product queries.

``specifications`` is an open‑ended, ordered key/value blob (RAM,
display size, waterproof...).  Values are restricted to strings,
numbers and booleans so the shape is checked at the boundary instead
of being passed around as arbitrary JSON.

``ProductFilters`` is the filter model consumed by
``core.query.query_products``: every field is optional and an absent
field imposes no constraint.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import CamelModel


SpecificationValue = Union[str, int, float, bool]
ProductSort = Literal["price_asc", "price_desc", "rating", "newest"]


class ProductBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Smartphone X Pro"])
    description: str = Field(..., examples=["Latest flagship smartphone"])
    price: float = Field(..., ge=0, examples=[15999])
    discounted_price: Optional[float] = Field(None, ge=0, examples=[12999])
    discount_percentage: Optional[int] = Field(None, ge=0, le=100, examples=[18])
    category_id: int = Field(..., examples=[1])
    brand: str = Field(..., examples=["TechX"])
    image_url: str = Field(..., examples=["https://images.example.com/phone.jpg"])
    rating: float = Field(0, ge=0, le=5, examples=[4.5])
    review_count: int = Field(0, ge=0, examples=[2345])
    in_stock: bool = Field(True, examples=[True])
    delivery_time: Optional[str] = Field("3-5 days", examples=["Free delivery by tomorrow"])
    specifications: Optional[Dict[str, SpecificationValue]] = Field(
        None, examples=[{"ram": "8GB", "storage": "128GB"}]
    )


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductUpdate(CamelModel):
    """Schema for patching a product.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    discounted_price: Optional[float] = Field(None, ge=0)
    discount_percentage: Optional[int] = Field(None, ge=0, le=100)
    category_id: Optional[int] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: Optional[int] = Field(None, ge=0)
    in_stock: Optional[bool] = None
    delivery_time: Optional[str] = None
    specifications: Optional[Dict[str, SpecificationValue]] = None


class ProductRead(ProductBase):
    id: int
    created_at: datetime


class ProductFilters(CamelModel):
    """Optional constraints for product listings; all are ANDed."""

    category_id: Optional[int] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    brand: Optional[List[str]] = None
    rating: Optional[float] = None
    in_stock: Optional[bool] = None
    search_term: Optional[str] = None
    sort_by: Optional[ProductSort] = None
