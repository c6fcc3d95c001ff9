from pydantic import BaseModel, Field
from typing import List, Optional
from core.roles import UserRole


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    subject: str
    role: UserRole = UserRole.COACH
    teams: List[int] = Field(default_factory=list)
    name: Optional[str] = None

    def can_manage_team(self, team_id: int) -> bool:
        if UserRole.has_permission(self.role, UserRole.ADMIN):
            return True
        return team_id in self.teams
