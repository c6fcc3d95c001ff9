from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from services.roster_engine import Position, TOTAL_SLOTS


class RosterEntryInput(BaseModel):
    quarter: int = Field(..., ge=1, le=4, description="Quarter (1-4)")
    position: Position
    player_id: int


class RosterSave(BaseModel):
    entries: List[RosterEntryInput] = Field(default_factory=list, max_length=TOTAL_SLOTS)

    @field_validator('entries')
    @classmethod
    def validate_unique_slots(cls, v):
        slots = [(e.quarter, e.position) for e in v]
        if len(slots) != len(set(slots)):
            raise ValueError("Each quarter/position slot can only be assigned once")
        return v


class SlotUpdate(BaseModel):
    quarter: int = Field(..., ge=1, le=4)
    position: Position
    player_id: int


class QuarterCopy(BaseModel):
    source_quarter: int = Field(..., ge=1, le=4)
    target_quarter: int = Field(..., ge=1, le=4)


class SlotRef(BaseModel):
    quarter: int
    position: Position


class RosterEntry(BaseModel):
    id: int
    game_id: int
    quarter: int
    position: Position
    player_id: int
    display_name: Optional[str] = None

    class Config:
        from_attributes = True


class AutoFillResponse(BaseModel):
    game_id: int
    entries: List[RosterEntry]
    assignment_counts: Dict[int, int]
    ideal_quarters: int
    min_quarters: int
    target_feasible: bool
    unfilled_slots: List[SlotRef] = Field(default_factory=list)
    message: str


class PlayerPlayingTime(BaseModel):
    player_id: int
    display_name: str
    quarters_played: int
    quarters: List[int]


class RosterSummary(BaseModel):
    game_id: int
    quarters: Dict[int, Dict[Position, Optional[int]]]
    filled_by_quarter: Dict[int, int]
    filled_slots: int
    total_slots: int = TOTAL_SLOTS
    completion_percentage: float
    position_labels: Dict[Position, str]
    players: List[PlayerPlayingTime]


class RosterSaveResponse(BaseModel):
    game_id: int
    saved_entries: int
    message: str
