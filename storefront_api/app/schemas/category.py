"""Pydantic models for product categories."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Electronics"])
    description: Optional[str] = Field(None, examples=["Latest gadgets & devices"])
    icon: str = Field(..., examples=["laptop"])
    color: str = Field(..., examples=["#2874f0"])


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryRead(CategoryBase):
    id: int
