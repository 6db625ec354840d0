"""
Business logic for events.

Events own team members, social accounts, content posts and calendar
entries through their ``eventId`` only.  Deleting an event does not
cascade: the dependent rows remain and simply point at an event that
no longer exists.
"""

import logging
from typing import List, Optional

from ..core.query import sort_events_by_start
from ..core.store import Store
from ..schemas.event import EventCreate, EventRead, EventUpdate


class EventService:
    """Service for managing events."""

    def __init__(self, store: Store) -> None:
        self.events = store.events

    def list_events(self, organizer_id: Optional[int] = None) -> List[EventRead]:
        """Return events, most recent start date first.

        - ``organizer_id``: restrict to events organised by this user.
        """
        if organizer_id is not None:
            events = self.events.list(lambda e: e.organizer_id == organizer_id)
        else:
            events = self.events.list()
        return sort_events_by_start(events)

    def get_event(self, event_id: int) -> Optional[EventRead]:
        return self.events.get(event_id)

    def create_event(self, data: EventCreate) -> EventRead:
        logger = logging.getLogger(__name__)
        event = self.events.create(data)
        logger.info("User %s created event %s '%s'", data.organizer_id, event.id, event.name)
        return event

    def update_event(self, event_id: int, updates: EventUpdate) -> Optional[EventRead]:
        """Update fields of an existing event.

        Only fields present in ``updates`` are changed.  Returns
        ``None`` if the event does not exist.
        """
        return self.events.update(event_id, updates)

    def delete_event(self, event_id: int) -> bool:
        deleted = self.events.delete(event_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted event %s", event_id)
        return deleted
