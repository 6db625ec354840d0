"""
Business logic for the content calendar.

Entries belong to an event and optionally point at a content post.
Listings are ordered by date; entries on the same date keep their
creation order.
"""

import logging
from typing import List, Optional

from ..core.query import in_month, sort_calendar_entries
from ..core.store import Store
from ..schemas.calendar import CalendarEntryCreate, CalendarEntryRead, CalendarEntryUpdate


logger = logging.getLogger(__name__)


class CalendarService:
    def __init__(self, store: Store) -> None:
        self.entries = store.calendar_entries

    def get_calendar_entries(
        self,
        event_id: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[CalendarEntryRead]:
        """Return an event's entries, optionally for one month only.

        ``month`` is 1‑12.  The month restriction applies only when both
        ``month`` and ``year`` are given.
        """
        if month is not None and year is not None:
            entries = self.entries.list(lambda e: e.event_id == event_id and in_month(e, month, year))
        else:
            entries = self.entries.list(lambda e: e.event_id == event_id)
        return sort_calendar_entries(entries)

    def get_calendar_entry(self, entry_id: int) -> Optional[CalendarEntryRead]:
        return self.entries.get(entry_id)

    def create_calendar_entry(self, data: CalendarEntryCreate) -> CalendarEntryRead:
        entry = self.entries.create(data)
        logger.info("Added %s '%s' on %s to event %s", entry.type, entry.title, entry.date, entry.event_id)
        return entry

    def update_calendar_entry(self, entry_id: int, data: CalendarEntryUpdate) -> Optional[CalendarEntryRead]:
        return self.entries.update(entry_id, data)

    def delete_calendar_entry(self, entry_id: int) -> bool:
        return self.entries.delete(entry_id)
