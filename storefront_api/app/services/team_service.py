"""
Business logic for event teams.

A team member ties a user to an event with a role.  No uniqueness is
enforced on (user, event): the same user can be added twice, for
example with two different roles.
"""

import logging
from typing import List, Optional

from ..core.store import Store
from ..schemas.team import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate


logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, store: Store) -> None:
        self.members = store.team_members

    def get_team_members(self, event_id: int) -> List[TeamMemberRead]:
        return self.members.list(lambda m: m.event_id == event_id)

    def get_user_team_memberships(self, user_id: int) -> List[TeamMemberRead]:
        return self.members.list(lambda m: m.user_id == user_id)

    def get_team_member(self, member_id: int) -> Optional[TeamMemberRead]:
        return self.members.get(member_id)

    def create_team_member(self, data: TeamMemberCreate) -> TeamMemberRead:
        member = self.members.create(data)
        logger.info("Added user %s to event %s as %s", member.user_id, member.event_id, member.role)
        return member

    def update_team_member(self, member_id: int, data: TeamMemberUpdate) -> Optional[TeamMemberRead]:
        return self.members.update(member_id, data)

    def remove_team_member(self, member_id: int) -> bool:
        return self.members.delete(member_id)
