"""
Product endpoints for API v1.

``GET /products`` translates its query string into a
``ProductFilters`` model:

- **categoryId** — only products of this category.
- **minPrice**, **maxPrice** — inclusive bounds on the effective price
  (discounted price when set, list price otherwise).
- **brand** — repeatable; keep products of any listed brand.
- **rating** — minimum rating.
- **inStock** — `true`/`false`.
- **searchTerm** — case‑insensitive match on name, description or brand.
- **sortBy** — `price_asc`, `price_desc`, `rating` or `newest`.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront_api.app.api.deps import get_product_service
from storefront_api.app.schemas.product import (
    ProductCreate,
    ProductFilters,
    ProductRead,
    ProductSort,
    ProductUpdate,
)
from storefront_api.app.services.product_service import ProductService


router = APIRouter()


def product_filters(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    brand: Optional[List[str]] = Query(None),
    rating: Optional[float] = Query(None),
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    sort_by: Optional[ProductSort] = Query(None, alias="sortBy"),
) -> ProductFilters:
    return ProductFilters(
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        brand=brand,
        rating=rating,
        in_stock=in_stock,
        search_term=search_term,
        sort_by=sort_by,
    )


@router.get("", response_model=List[ProductRead])
async def list_products(
    filters: ProductFilters = Depends(product_filters),
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    return service.list_products(filters)


@router.get("/category/{category_id}", response_model=List[ProductRead])
async def list_products_by_category(
    category_id: int,
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    return service.list_products_by_category(category_id)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)) -> ProductRead:
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return service.create_product(product)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    updates: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = service.update_product(product_id, updates)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.delete("/{product_id}")
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)) -> dict:
    if not service.delete_product(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return {"message": "Product deleted successfully"}
