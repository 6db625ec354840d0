"""
Event endpoints for API v1.

These routes provide CRUD operations for events.  Deleting an event
leaves its team members, accounts, posts and calendar entries in
place.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront_api.app.api.deps import get_event_service
from storefront_api.app.schemas.event import EventCreate, EventRead, EventUpdate
from storefront_api.app.services.event_service import EventService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(
    user_id: Optional[int] = Query(None, alias="userId"),
    service: EventService = Depends(get_event_service),
) -> List[EventRead]:
    """List events, most recent start date first.

    - **userId** — only events organised by this user.
    """
    return service.list_events(organizer_id=user_id)


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: int, service: EventService = Depends(get_event_service)) -> EventRead:
    event = service.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, service: EventService = Depends(get_event_service)) -> EventRead:
    return service.create_event(event)


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    event = service.update_event(event_id, updates)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}")
async def delete_event(event_id: int, service: EventService = Depends(get_event_service)) -> dict:
    if not service.delete_event(event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return {"message": "Event deleted successfully"}
