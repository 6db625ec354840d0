"""
Pydantic models for social platforms and the accounts linked to events.

Platforms form a global catalog (Facebook, Instagram...).  Accounts
belong to one event and one platform and hold the tokens needed to
publish on the event's behalf.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class SocialPlatformBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Instagram"])
    icon: Optional[str] = Field(None, examples=["instagram"])
    api_endpoint: Optional[str] = Field(None, examples=["https://graph.instagram.com"])
    active: bool = Field(True, examples=[True])


class SocialPlatformCreate(SocialPlatformBase):
    """Schema for registering a platform in the catalog."""
    pass


class SocialPlatformUpdate(CamelModel):
    name: Optional[str] = None
    icon: Optional[str] = None
    api_endpoint: Optional[str] = None
    active: Optional[bool] = None


class SocialPlatformRead(SocialPlatformBase):
    id: int


class SocialAccountBase(CamelModel):
    event_id: int = Field(..., examples=[1])
    platform_id: int = Field(..., examples=[3])
    account_name: str = Field(..., min_length=1, examples=["Tech Summit"])
    account_handle: str = Field(..., min_length=1, examples=["@techsummit"])
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_expiry: Optional[datetime] = None
    active: bool = Field(True, examples=[True])


class SocialAccountCreate(SocialAccountBase):
    """Schema for linking a social account to an event."""
    pass


class SocialAccountUpdate(CamelModel):
    event_id: Optional[int] = None
    platform_id: Optional[int] = None
    account_name: Optional[str] = None
    account_handle: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_expiry: Optional[datetime] = None
    active: Optional[bool] = None


class SocialAccountRead(SocialAccountBase):
    id: int
    created_at: datetime
