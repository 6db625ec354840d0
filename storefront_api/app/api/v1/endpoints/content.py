"""
Content post and approval endpoints for API v1.

``GET /content-posts`` accepts these filters:

- **eventId**, **creatorId**, **status** — exact matches.
- **startDate**, **endDate** — inclusive range on ``scheduledFor``
  (ISO date‑times); unscheduled posts never match a range.
- **platform** — platform id contained in the post's platforms.
- **tag** — tag contained in the post's tags.
- **searchTerm** — case‑insensitive match on title or content.
- **sortBy** — `scheduled_asc`, `scheduled_desc` (default),
  `created_asc` or `created_desc`.

Post reads include ``platformNames`` resolved from the platform
catalog.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront_api.app.api.deps import get_approval_service, get_post_service
from storefront_api.app.schemas.content import (
    ContentApprovalCreate,
    ContentApprovalRead,
    ContentPostCreate,
    ContentPostDetail,
    ContentPostFilters,
    ContentPostUpdate,
    PostSort,
)
from storefront_api.app.services.content_service import ContentApprovalService, ContentPostService


router = APIRouter()


def content_post_filters(
    event_id: Optional[int] = Query(None, alias="eventId"),
    creator_id: Optional[int] = Query(None, alias="creatorId"),
    post_status: Optional[str] = Query(None, alias="status"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    platform: Optional[int] = Query(None),
    tag: Optional[str] = Query(None),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    sort_by: Optional[PostSort] = Query(None, alias="sortBy"),
) -> ContentPostFilters:
    return ContentPostFilters(
        event_id=event_id,
        creator_id=creator_id,
        status=post_status,
        start_date=start_date,
        end_date=end_date,
        platform=platform,
        tag=tag,
        search_term=search_term,
        sort_by=sort_by,
    )


def _detail_or_404(service: ContentPostService, post_id: int) -> ContentPostDetail:
    post = service.get_content_post_detail(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content post not found")
    return post


@router.get("/content-posts", response_model=List[ContentPostDetail])
async def list_content_posts(
    filters: ContentPostFilters = Depends(content_post_filters),
    service: ContentPostService = Depends(get_post_service),
) -> List[ContentPostDetail]:
    return service.list_content_posts(filters)


@router.get("/content-posts/{post_id}", response_model=ContentPostDetail)
async def get_content_post(post_id: int, service: ContentPostService = Depends(get_post_service)) -> ContentPostDetail:
    return _detail_or_404(service, post_id)


@router.post("/content-posts", response_model=ContentPostDetail, status_code=status.HTTP_201_CREATED)
async def create_content_post(
    post: ContentPostCreate,
    service: ContentPostService = Depends(get_post_service),
) -> ContentPostDetail:
    created = service.create_content_post(post)
    return _detail_or_404(service, created.id)


@router.put("/content-posts/{post_id}", response_model=ContentPostDetail)
async def update_content_post(
    post_id: int,
    updates: ContentPostUpdate,
    service: ContentPostService = Depends(get_post_service),
) -> ContentPostDetail:
    if service.update_content_post(post_id, updates) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content post not found")
    return _detail_or_404(service, post_id)


@router.delete("/content-posts/{post_id}")
async def delete_content_post(post_id: int, service: ContentPostService = Depends(get_post_service)) -> dict:
    if not service.delete_content_post(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content post not found")
    return {"message": "Content post deleted successfully"}


@router.get("/content-posts/{post_id}/approvals", response_model=List[ContentApprovalRead])
async def get_content_approvals(
    post_id: int,
    service: ContentApprovalService = Depends(get_approval_service),
) -> List[ContentApprovalRead]:
    """Approval decisions for a post, newest first."""
    return service.get_content_approvals(post_id)


@router.post("/content-approvals", response_model=ContentApprovalRead, status_code=status.HTTP_201_CREATED)
async def create_content_approval(
    approval: ContentApprovalCreate,
    service: ContentApprovalService = Depends(get_approval_service),
) -> ContentApprovalRead:
    return service.create_content_approval(approval)
