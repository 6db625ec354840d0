"""
User endpoints for API v1.

Registration and profile maintenance.  Passwords are accepted on
input only and never returned.  Login sessions are handled by the
authentication subsystem and are not exposed here.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_user_service
from storefront_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from storefront_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Register a new user.

    Responds with 400 if the username or email is already taken.
    """
    return service.create_user(user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    updates: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Patch a user's profile; unspecified fields remain unchanged."""
    user = service.update_user(user_id, updates)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
