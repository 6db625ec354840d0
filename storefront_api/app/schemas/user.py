"""
Pydantic models for user data.

Defines schemas for registering users, patching their profile and
reading them back.  The stored record (``UserRecord``) carries the
password hash; ``UserRead`` is what the API returns and never exposes
it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class UserBase(CamelModel):
    username: str = Field(..., min_length=1, examples=["jdoe"])
    email: str = Field(..., min_length=3, examples=["user@example.com"])
    name: str = Field(..., min_length=1, examples=["John Doe"])
    address: Optional[str] = Field(None, examples=["221B Baker Street"])
    phone: Optional[str] = Field(None, examples=["+1 555 0100"])
    role: Optional[str] = Field("user", examples=["user"])


class UserCreate(UserBase):
    """Schema for registering a user.

    The plain ``password`` is hashed by ``UserService`` before the row
    is written.
    """

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserUpdate(CamelModel):
    """Schema for patching a user.

    All fields are optional; only provided fields will be updated.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None


class UserRecord(UserBase):
    """A user as stored in the users table."""

    id: int
    password: str
    created_at: datetime


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    created_at: datetime
