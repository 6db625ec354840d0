"""
Cart endpoints for API v1.

Every response embeds the product of each cart row (``product`` is
``null`` when the product has since been deleted).  Posting a product
that is already in the user's cart increases the quantity of the
existing row.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_cart_service
from storefront_api.app.schemas.cart import CartItemCreate, CartItemUpdate, CartItemWithProduct
from storefront_api.app.services.cart_service import CartService


router = APIRouter()


@router.get("/{user_id}", response_model=List[CartItemWithProduct])
async def get_cart(user_id: int, service: CartService = Depends(get_cart_service)) -> List[CartItemWithProduct]:
    return service.list_cart(user_id)


@router.post("", response_model=CartItemWithProduct, status_code=status.HTTP_201_CREATED)
async def add_to_cart(item: CartItemCreate, service: CartService = Depends(get_cart_service)) -> CartItemWithProduct:
    added = service.add_to_cart(item.user_id, item.product_id, item.quantity)
    return service.with_product(added)


@router.put("/{item_id}", response_model=CartItemWithProduct)
async def update_cart_item(
    item_id: int,
    update: CartItemUpdate,
    service: CartService = Depends(get_cart_service),
) -> CartItemWithProduct:
    item = service.update_cart_item(item_id, update.quantity)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart item not found")
    return service.with_product(item)


@router.delete("/user/{user_id}")
async def clear_cart(user_id: int, service: CartService = Depends(get_cart_service)) -> dict:
    service.clear_cart(user_id)
    return {"message": "Cart cleared"}


@router.delete("/{item_id}")
async def remove_from_cart(item_id: int, service: CartService = Depends(get_cart_service)) -> dict:
    if not service.remove_from_cart(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart item not found")
    return {"message": "Item removed from cart"}
