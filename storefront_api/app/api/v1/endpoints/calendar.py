"""
Content calendar endpoints for API v1.

The planner UI sends ``month`` the way JavaScript's ``Date.getMonth``
counts (0 = January), so the route shifts it to a 1‑12 calendar month
before asking the service.  Both ``month`` and ``year`` must be given
for the month restriction to apply.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront_api.app.api.deps import get_calendar_service
from storefront_api.app.schemas.calendar import CalendarEntryCreate, CalendarEntryRead, CalendarEntryUpdate
from storefront_api.app.services.calendar_service import CalendarService


router = APIRouter()


@router.get("/events/{event_id}/calendar", response_model=List[CalendarEntryRead])
async def get_calendar_entries(
    event_id: int,
    month: Optional[int] = Query(None, ge=0, le=11, description="Zero-based month (0 = January)"),
    year: Optional[int] = Query(None, ge=1),
    service: CalendarService = Depends(get_calendar_service),
) -> List[CalendarEntryRead]:
    calendar_month = month + 1 if month is not None else None
    return service.get_calendar_entries(event_id, calendar_month, year)


@router.post("/calendar-entries", response_model=CalendarEntryRead, status_code=status.HTTP_201_CREATED)
async def create_calendar_entry(
    entry: CalendarEntryCreate,
    service: CalendarService = Depends(get_calendar_service),
) -> CalendarEntryRead:
    return service.create_calendar_entry(entry)


@router.put("/calendar-entries/{entry_id}", response_model=CalendarEntryRead)
async def update_calendar_entry(
    entry_id: int,
    updates: CalendarEntryUpdate,
    service: CalendarService = Depends(get_calendar_service),
) -> CalendarEntryRead:
    entry = service.update_calendar_entry(entry_id, updates)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar entry not found")
    return entry


@router.delete("/calendar-entries/{entry_id}")
async def delete_calendar_entry(entry_id: int, service: CalendarService = Depends(get_calendar_service)) -> dict:
    if not service.delete_calendar_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar entry not found")
    return {"message": "Calendar entry deleted successfully"}
