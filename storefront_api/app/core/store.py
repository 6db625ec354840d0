"""
In‑memory tables and the store that owns them.

Every entity kind lives in its own ``Table``: an insertion‑ordered
mapping from integer id to a pydantic record.  A table exposes the
generic repository contract used by all services:

* ``get`` / ``find`` / ``list`` for reads,
* ``create`` which allocates an id and stamps timestamps,
* ``update`` which shallow‑merges a partial payload over a row,
* ``delete`` / ``delete_where`` for removal.

Reads and writes hand out copies, so callers can never mutate a row
behind the table's back.  Identities come from a per‑table
``IdentityGenerator`` and are never reused, even after deletion.

The ``Store`` groups the twelve tables of the application.  It is
constructed once by ``create_app`` and injected into the routes; tests
build their own instance so that no state leaks between them.
Everything here is synchronous: table operations run to completion
before the next one starts.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from ..schemas.calendar import CalendarEntryRead
from ..schemas.cart import CartItemRead
from ..schemas.category import CategoryRead
from ..schemas.chat import ChatMessageRead
from ..schemas.content import ContentApprovalRead, ContentPostRead
from ..schemas.event import EventRead
from ..schemas.product import ProductRead
from ..schemas.social import SocialAccountRead, SocialPlatformRead
from ..schemas.team import TeamMemberRead
from ..schemas.user import UserRecord


ModelT = TypeVar("ModelT", bound=BaseModel)
Payload = Union[BaseModel, Mapping[str, Any]]

# Fields stamped by the table on create.  ``updated_at`` is also
# refreshed on every update.
CREATION_STAMPS = ("created_at", "updated_at", "timestamp")
IMMUTABLE_FIELDS = ("id", "created_at", "timestamp")


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class IdentityGenerator:
    """Monotonic integer sequence starting at 1."""

    def __init__(self) -> None:
        self._last = 0

    def next(self) -> int:
        self._last += 1
        return self._last

    @property
    def last(self) -> int:
        """The most recently issued identity (0 if none)."""
        return self._last


def _payload_to_dict(payload: Payload, partial: bool) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        # For partial updates only the fields the caller actually sent
        # are merged; explicit ``None`` values are kept so that optional
        # fields can be cleared.
        return payload.model_dump(exclude_unset=partial)
    return dict(payload)


class Table(Generic[ModelT]):
    """Keyed collection of records of a single entity kind."""

    def __init__(self, name: str, model: Type[ModelT]) -> None:
        self.name = name
        self.model = model
        self._rows: Dict[int, ModelT] = {}
        self._ids = IdentityGenerator()

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._rows

    def __iter__(self) -> Iterator[ModelT]:
        return iter(self.list())

    def _has_field(self, field: str) -> bool:
        return field in self.model.model_fields

    def get(self, row_id: int) -> Optional[ModelT]:
        row = self._rows.get(row_id)
        if row is None:
            return None
        return row.model_copy(deep=True)

    def list(self, predicate: Optional[Callable[[ModelT], bool]] = None) -> List[ModelT]:
        """Return rows in insertion order, optionally restricted by ``predicate``."""
        rows = self._rows.values()
        if predicate is not None:
            rows = [row for row in rows if predicate(row)]
        return [row.model_copy(deep=True) for row in rows]

    def find(self, predicate: Callable[[ModelT], bool]) -> Optional[ModelT]:
        """Return the first row (insertion order) matching ``predicate``."""
        for row in self._rows.values():
            if predicate(row):
                return row.model_copy(deep=True)
        return None

    def create(self, payload: Payload) -> ModelT:
        values = copy.deepcopy(_payload_to_dict(payload, partial=False))
        values["id"] = self._ids.next()
        now = utcnow()
        for stamp in CREATION_STAMPS:
            if self._has_field(stamp):
                values[stamp] = now
        row = self.model.model_validate(values)
        self._rows[row.id] = row
        return row.model_copy(deep=True)

    def update(self, row_id: int, payload: Payload) -> Optional[ModelT]:
        """Shallow‑merge ``payload`` over the row with ``row_id``.

        Returns ``None`` when the id is unknown.  The merged record is
        validated against the table model before it replaces the stored
        row, so an invalid patch raises ``ValidationError`` and leaves
        the table untouched.
        """
        current = self._rows.get(row_id)
        if current is None:
            return None
        changes = copy.deepcopy(_payload_to_dict(payload, partial=True))
        for field in IMMUTABLE_FIELDS:
            changes.pop(field, None)
        values = current.model_dump()
        values.update(changes)
        if self._has_field("updated_at"):
            previous = current.updated_at
            now = utcnow()
            values["updated_at"] = now if previous is None or now >= previous else previous
        row = self.model.model_validate(values)
        self._rows[row_id] = row
        return row.model_copy(deep=True)

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None

    def delete_where(self, predicate: Callable[[ModelT], bool]) -> int:
        """Remove every row matching ``predicate``; return how many went."""
        doomed = [row_id for row_id, row in self._rows.items() if predicate(row)]
        for row_id in doomed:
            del self._rows[row_id]
        return len(doomed)


class Store:
    """All tables of the application, owned by a single object."""

    def __init__(self) -> None:
        self.users: Table[UserRecord] = Table("users", UserRecord)
        self.categories: Table[CategoryRead] = Table("categories", CategoryRead)
        self.products: Table[ProductRead] = Table("products", ProductRead)
        self.cart_items: Table[CartItemRead] = Table("cart_items", CartItemRead)
        self.chat_messages: Table[ChatMessageRead] = Table("chat_messages", ChatMessageRead)
        self.events: Table[EventRead] = Table("events", EventRead)
        self.team_members: Table[TeamMemberRead] = Table("team_members", TeamMemberRead)
        self.social_platforms: Table[SocialPlatformRead] = Table("social_platforms", SocialPlatformRead)
        self.social_accounts: Table[SocialAccountRead] = Table("social_accounts", SocialAccountRead)
        self.content_posts: Table[ContentPostRead] = Table("content_posts", ContentPostRead)
        self.content_approvals: Table[ContentApprovalRead] = Table("content_approvals", ContentApprovalRead)
        self.calendar_entries: Table[CalendarEntryRead] = Table("calendar_entries", CalendarEntryRead)

    def tables(self) -> List[Table]:
        return [value for value in vars(self).values() if isinstance(value, Table)]
