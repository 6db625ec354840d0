"""
Business logic for users.

The ``UserService`` keeps usernames and emails unique, hashes
passwords before they reach the table and converts stored records to
``UserRead`` so that password hashes never leave the service.
"""

import logging
from typing import Optional

from ..core.errors import DuplicateUserError
from ..core.security import hash_password
from ..core.store import Store
from ..schemas.user import UserCreate, UserRead, UserRecord, UserUpdate


logger = logging.getLogger(__name__)


def _to_read(record: Optional[UserRecord]) -> Optional[UserRead]:
    if record is None:
        return None
    return UserRead.model_validate(record.model_dump(exclude={"password"}))


class UserService:
    """Service for registering and maintaining users."""

    def __init__(self, store: Store) -> None:
        self.users = store.users

    def get_user(self, user_id: int) -> Optional[UserRead]:
        return _to_read(self.users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        return _to_read(self.users.find(lambda u: u.username == username))

    def get_user_by_email(self, email: str) -> Optional[UserRead]:
        return _to_read(self.users.find(lambda u: u.email == email))

    def _ensure_unique(self, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None) -> None:
        if username is not None:
            existing = self.users.find(lambda u: u.username == username)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateUserError("username", username)
        if email is not None:
            existing = self.users.find(lambda u: u.email == email)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateUserError("email", email)

    def create_user(self, data: UserCreate) -> UserRead:
        """Register a new user.

        Raises ``DuplicateUserError`` if the username or email is
        already taken; nothing is written in that case.
        """
        self._ensure_unique(data.username, data.email)
        values = data.model_dump()
        values["password"] = hash_password(data.password)
        record = self.users.create(values)
        logger.info("Registered user %s (%s)", record.id, record.username)
        return _to_read(record)

    def update_user(self, user_id: int, data: UserUpdate) -> Optional[UserRead]:
        """Patch a user; returns ``None`` if the user does not exist."""
        if user_id not in self.users:
            return None
        changes = data.model_dump(exclude_unset=True)
        self._ensure_unique(changes.get("username"), changes.get("email"), exclude_id=user_id)
        password = changes.pop("password", None)
        if password:
            changes["password"] = hash_password(password)
        record = self.users.update(user_id, changes)
        logger.info("Updated user %s", user_id)
        return _to_read(record)
