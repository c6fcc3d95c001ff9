from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from services.roster_engine import Position


def validate_preferences(v):
    if v is None:
        return v
    if len(v) != len(set(v)):
        raise ValueError("Position preferences must not repeat a position")
    return v


class PlayerBase(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=60)
    first_name: Optional[str] = Field(None, max_length=60)
    last_name: Optional[str] = Field(None, max_length=60)
    position_preferences: List[Position] = Field(default_factory=list, max_length=7)
    active: bool = True

    @field_validator('position_preferences')
    @classmethod
    def unique_preferences(cls, v):
        return validate_preferences(v)


class PlayerCreate(PlayerBase):
    pass


class PlayerUpdate(BaseModel):
    display_name: Optional[str] = Field(None, min_length=1, max_length=60)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position_preferences: Optional[List[Position]] = Field(None, max_length=7)
    active: Optional[bool] = None

    # Omitting these fields leaves them unchanged, an explicit null is rejected
    @field_validator('display_name', 'position_preferences', 'active')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator('position_preferences')
    @classmethod
    def unique_preferences(cls, v):
        return validate_preferences(v)


class Player(PlayerBase):
    id: int
    team_id: int

    class Config:
        from_attributes = True
