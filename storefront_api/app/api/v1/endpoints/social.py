"""
Social platform and social account endpoints for API v1.

Included without a prefix: the router mixes catalog paths
(``/social-platforms``) with event‑scoped ones
(``/events/{id}/social-accounts``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_account_service, get_platform_service
from storefront_api.app.schemas.social import (
    SocialAccountCreate,
    SocialAccountRead,
    SocialAccountUpdate,
    SocialPlatformCreate,
    SocialPlatformRead,
    SocialPlatformUpdate,
)
from storefront_api.app.services.social_service import SocialAccountService, SocialPlatformService


router = APIRouter()


@router.get("/social-platforms", response_model=List[SocialPlatformRead])
async def get_social_platforms(
    service: SocialPlatformService = Depends(get_platform_service),
) -> List[SocialPlatformRead]:
    """Active platforms, sorted by name."""
    return service.get_social_platforms()


@router.post("/social-platforms", response_model=SocialPlatformRead, status_code=status.HTTP_201_CREATED)
async def create_social_platform(
    platform: SocialPlatformCreate,
    service: SocialPlatformService = Depends(get_platform_service),
) -> SocialPlatformRead:
    return service.create_social_platform(platform)


@router.put("/social-platforms/{platform_id}", response_model=SocialPlatformRead)
async def update_social_platform(
    platform_id: int,
    updates: SocialPlatformUpdate,
    service: SocialPlatformService = Depends(get_platform_service),
) -> SocialPlatformRead:
    platform = service.update_social_platform(platform_id, updates)
    if platform is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Social platform not found")
    return platform


@router.get("/events/{event_id}/social-accounts", response_model=List[SocialAccountRead])
async def get_social_accounts(
    event_id: int,
    service: SocialAccountService = Depends(get_account_service),
) -> List[SocialAccountRead]:
    return service.get_social_accounts(event_id)


@router.post("/social-accounts", response_model=SocialAccountRead, status_code=status.HTTP_201_CREATED)
async def create_social_account(
    account: SocialAccountCreate,
    service: SocialAccountService = Depends(get_account_service),
) -> SocialAccountRead:
    return service.create_social_account(account)


@router.put("/social-accounts/{account_id}", response_model=SocialAccountRead)
async def update_social_account(
    account_id: int,
    updates: SocialAccountUpdate,
    service: SocialAccountService = Depends(get_account_service),
) -> SocialAccountRead:
    account = service.update_social_account(account_id, updates)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Social account not found")
    return account


@router.delete("/social-accounts/{account_id}")
async def delete_social_account(
    account_id: int,
    service: SocialAccountService = Depends(get_account_service),
) -> dict:
    if not service.delete_social_account(account_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Social account not found")
    return {"message": "Social account deleted successfully"}
