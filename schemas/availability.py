from pydantic import BaseModel, Field, field_validator
from typing import List


class AvailabilityUpdate(BaseModel):
    available_player_ids: List[int] = Field(default_factory=list, description="Players who can make the game")

    @field_validator('available_player_ids')
    @classmethod
    def unique_ids(cls, v):
        if len(v) != len(set(v)):
            raise ValueError("A player can only be listed once")
        return v


class PlayerAvailabilityUpdate(BaseModel):
    is_available: bool


class PlayerAvailabilityEntry(BaseModel):
    player_id: int
    display_name: str
    is_available: bool


class GameAvailability(BaseModel):
    game_id: int
    is_set: bool = Field(..., description="False until availability is saved; every active player then counts as available")
    available_player_ids: List[int]
    players: List[PlayerAvailabilityEntry]
