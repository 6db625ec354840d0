"""Category endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_category_service
from storefront_api.app.schemas.category import CategoryCreate, CategoryRead
from storefront_api.app.services.category_service import CategoryService


router = APIRouter()


@router.get("", response_model=List[CategoryRead])
async def list_categories(service: CategoryService = Depends(get_category_service)) -> List[CategoryRead]:
    return service.list_categories()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: int, service: CategoryService = Depends(get_category_service)) -> CategoryRead:
    category = service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryRead:
    return service.create_category(category)
