"""
Business logic for social platforms and event social accounts.

The platform catalog is global.  Listings only show active platforms,
sorted by name; lookups by id see inactive ones too so that existing
posts and accounts keep resolving.
"""

import logging
from typing import List, Optional

from ..core.store import Store
from ..schemas.social import (
    SocialAccountCreate,
    SocialAccountRead,
    SocialAccountUpdate,
    SocialPlatformCreate,
    SocialPlatformRead,
    SocialPlatformUpdate,
)


logger = logging.getLogger(__name__)


class SocialPlatformService:
    def __init__(self, store: Store) -> None:
        self.platforms = store.social_platforms

    def get_social_platforms(self) -> List[SocialPlatformRead]:
        """Active platforms sorted by name (case‑insensitive)."""
        active = self.platforms.list(lambda p: p.active)
        return sorted(active, key=lambda p: p.name.casefold())

    def get_social_platform(self, platform_id: int) -> Optional[SocialPlatformRead]:
        return self.platforms.get(platform_id)

    def create_social_platform(self, data: SocialPlatformCreate) -> SocialPlatformRead:
        if self.platforms.find(lambda p: p.name == data.name) is not None:
            raise ValueError(f"Social platform '{data.name}' already exists")
        platform = self.platforms.create(data)
        logger.info("Registered social platform %s (%s)", platform.id, platform.name)
        return platform

    def update_social_platform(self, platform_id: int, data: SocialPlatformUpdate) -> Optional[SocialPlatformRead]:
        if data.name is not None:
            clash = self.platforms.find(lambda p: p.name == data.name and p.id != platform_id)
            if clash is not None:
                raise ValueError(f"Social platform '{data.name}' already exists")
        return self.platforms.update(platform_id, data)


class SocialAccountService:
    def __init__(self, store: Store) -> None:
        self.accounts = store.social_accounts

    def get_social_accounts(self, event_id: int) -> List[SocialAccountRead]:
        return self.accounts.list(lambda a: a.event_id == event_id)

    def get_social_account(self, account_id: int) -> Optional[SocialAccountRead]:
        return self.accounts.get(account_id)

    def create_social_account(self, data: SocialAccountCreate) -> SocialAccountRead:
        account = self.accounts.create(data)
        logger.info("Linked %s account %s to event %s", account.platform_id, account.account_handle, account.event_id)
        return account

    def update_social_account(self, account_id: int, data: SocialAccountUpdate) -> Optional[SocialAccountRead]:
        return self.accounts.update(account_id, data)

    def delete_social_account(self, account_id: int) -> bool:
        return self.accounts.delete(account_id)
