"""
Team member endpoints for API v1.

The router defines full paths (``/events/{id}/team``,
``/users/{id}/teams``, ``/team-members``) and is included without a
prefix.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_team_service
from storefront_api.app.schemas.team import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from storefront_api.app.services.team_service import TeamService


router = APIRouter()


@router.get("/events/{event_id}/team", response_model=List[TeamMemberRead])
async def get_team_members(event_id: int, service: TeamService = Depends(get_team_service)) -> List[TeamMemberRead]:
    return service.get_team_members(event_id)


@router.get("/users/{user_id}/teams", response_model=List[TeamMemberRead])
async def get_user_team_memberships(
    user_id: int,
    service: TeamService = Depends(get_team_service),
) -> List[TeamMemberRead]:
    return service.get_user_team_memberships(user_id)


@router.post("/team-members", response_model=TeamMemberRead, status_code=status.HTTP_201_CREATED)
async def create_team_member(
    member: TeamMemberCreate,
    service: TeamService = Depends(get_team_service),
) -> TeamMemberRead:
    return service.create_team_member(member)


@router.put("/team-members/{member_id}", response_model=TeamMemberRead)
async def update_team_member(
    member_id: int,
    updates: TeamMemberUpdate,
    service: TeamService = Depends(get_team_service),
) -> TeamMemberRead:
    member = service.update_team_member(member_id, updates)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return member


@router.delete("/team-members/{member_id}")
async def remove_team_member(member_id: int, service: TeamService = Depends(get_team_service)) -> dict:
    if not service.remove_team_member(member_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return {"message": "Team member removed successfully"}
