"""
Business logic for scheduled content and its approvals.

Post listings run through ``core.query.query_content_posts`` (filters
plus the scheduled/created sorts) and are then stitched with platform
names.  Approvals are append‑only decision records: they can be
created and read but never changed, and a post's approvals are listed
newest first.
"""

import logging
from typing import List, Optional

from ..core.query import as_utc, query_content_posts
from ..core.stitching import with_platform_names, with_platform_names_all
from ..core.store import Store
from ..schemas.content import (
    ContentApprovalCreate,
    ContentApprovalRead,
    ContentPostCreate,
    ContentPostDetail,
    ContentPostFilters,
    ContentPostRead,
    ContentPostUpdate,
)


logger = logging.getLogger(__name__)


class ContentPostService:
    """Service for content posts."""

    def __init__(self, store: Store) -> None:
        self.posts = store.content_posts
        self.platforms = store.social_platforms

    def get_content_posts(self, filters: Optional[ContentPostFilters] = None) -> List[ContentPostRead]:
        return query_content_posts(self.posts.list(), filters)

    def list_content_posts(self, filters: Optional[ContentPostFilters] = None) -> List[ContentPostDetail]:
        """Filtered, sorted posts with ``platformNames`` resolved."""
        return with_platform_names_all(self.get_content_posts(filters), self.platforms)

    def get_content_post(self, post_id: int) -> Optional[ContentPostRead]:
        return self.posts.get(post_id)

    def get_content_post_detail(self, post_id: int) -> Optional[ContentPostDetail]:
        post = self.posts.get(post_id)
        if post is None:
            return None
        return with_platform_names(post, self.platforms)

    def create_content_post(self, data: ContentPostCreate) -> ContentPostRead:
        post = self.posts.create(data)
        logger.info("Created %s post %s for event %s", post.status, post.id, post.event_id)
        return post

    def update_content_post(self, post_id: int, data: ContentPostUpdate) -> Optional[ContentPostRead]:
        """Patch a post and refresh its ``updatedAt``."""
        post = self.posts.update(post_id, data)
        if post is not None:
            logger.info("Updated post %s (status %s)", post_id, post.status)
        return post

    def delete_content_post(self, post_id: int) -> bool:
        return self.posts.delete(post_id)


class ContentApprovalService:
    """Service for approval decisions on posts."""

    def __init__(self, store: Store) -> None:
        self.approvals = store.content_approvals

    def get_content_approvals(self, post_id: int) -> List[ContentApprovalRead]:
        approvals = self.approvals.list(lambda a: a.post_id == post_id)
        # Ids break ties between approvals stamped in the same instant.
        return sorted(approvals, key=lambda a: (as_utc(a.created_at), a.id), reverse=True)

    def get_content_approval(self, approval_id: int) -> Optional[ContentApprovalRead]:
        return self.approvals.get(approval_id)

    def create_content_approval(self, data: ContentApprovalCreate) -> ContentApprovalRead:
        approval = self.approvals.create(data)
        logger.info("User %s recorded '%s' on post %s", approval.approver_id, approval.status, approval.post_id)
        return approval
