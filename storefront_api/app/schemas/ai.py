"""Pydantic models for AI content generation."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ContentGenerationRequest(CamelModel):
    prompt: str = Field(..., min_length=1, examples=["Announce early bird tickets"])
    event_id: int = Field(..., examples=[1])
    platform: Optional[int] = Field(None, description="Social platform id to tailor the copy for")


class GeneratedContent(CamelModel):
    content: str
    event: str = Field(..., description="Name of the event the copy was written for")
    platform: str = Field(..., description="Platform name, or 'Generic' when none was requested")
