from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100, description="Team name")


class Team(BaseModel):
    id: int
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
