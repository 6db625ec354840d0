"""
Pydantic models for scheduled social content.

A post moves through ``draft → scheduled → published`` (or ``failed``).
``platforms`` holds social platform ids and ``tags`` free‑form labels;
``metrics`` collects engagement counters reported by the platforms.

Approvals are immutable decision records attached to a post: there is
no update schema for them.

``ContentPostFilters`` is the filter model consumed by
``core.query.query_content_posts``.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import CamelModel


PostStatus = Literal["draft", "scheduled", "published", "failed"]
ApprovalStatus = Literal["pending", "approved", "rejected"]
PostSort = Literal["scheduled_asc", "scheduled_desc", "created_asc", "created_desc"]
MetricValue = Union[int, float]


class ContentPostBase(CamelModel):
    event_id: int = Field(..., examples=[1])
    creator_id: int = Field(..., examples=[1])
    title: str = Field(..., min_length=1, examples=["Speaker announcement"])
    content: str = Field(..., examples=["Meet our keynote speaker!"])
    media_urls: Optional[List[str]] = None
    status: PostStatus = Field("draft", examples=["draft"])
    scheduled_for: Optional[datetime] = Field(None, examples=["2025-08-20T09:00:00Z"])
    published_at: Optional[datetime] = None
    platforms: Optional[List[int]] = Field(None, examples=[[1, 3]])
    tags: Optional[List[str]] = Field(None, examples=[["speakers", "keynote"]])
    metrics: Optional[Dict[str, MetricValue]] = None


class ContentPostCreate(ContentPostBase):
    """Schema for creating a post."""
    pass


class ContentPostUpdate(CamelModel):
    """Schema for patching a post.

    All fields are optional; only provided fields will be updated.
    The post's ``updatedAt`` is refreshed on every patch.
    """

    event_id: Optional[int] = None
    creator_id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None
    media_urls: Optional[List[str]] = None
    status: Optional[PostStatus] = None
    scheduled_for: Optional[datetime] = None
    published_at: Optional[datetime] = None
    platforms: Optional[List[int]] = None
    tags: Optional[List[str]] = None
    metrics: Optional[Dict[str, MetricValue]] = None


class ContentPostRead(ContentPostBase):
    id: int
    created_at: datetime
    updated_at: datetime


class ContentPostDetail(ContentPostRead):
    """A post with its platform ids resolved to platform names."""

    platform_names: List[str] = Field(default_factory=list)


class ContentPostFilters(CamelModel):
    """Optional constraints for post listings; all are ANDed."""

    event_id: Optional[int] = None
    creator_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    platform: Optional[int] = None
    tag: Optional[str] = None
    search_term: Optional[str] = None
    sort_by: Optional[PostSort] = None


class ContentApprovalBase(CamelModel):
    post_id: int = Field(..., examples=[1])
    approver_id: int = Field(..., examples=[2])
    status: ApprovalStatus = Field(..., examples=["approved"])
    comments: Optional[str] = Field(None, examples=["Looks good"])


class ContentApprovalCreate(ContentApprovalBase):
    """Schema for recording an approval decision."""
    pass


class ContentApprovalRead(ContentApprovalBase):
    id: int
    created_at: datetime
