from datetime import date as calendar_date
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from models.game import GameStatus


class GameCreate(BaseModel):
    opponent: Optional[str] = Field(None, max_length=100, description="Opponent name, empty for a BYE")
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Game date (YYYY-MM-DD)")
    round: Optional[str] = Field(None, max_length=10)
    status: GameStatus = GameStatus.UPCOMING

    @field_validator('date')
    @classmethod
    def real_calendar_date(cls, v):
        try:
            calendar_date.fromisoformat(v)
        except ValueError:
            raise ValueError(f"{v} is not a valid date")
        return v


class Game(BaseModel):
    id: int
    team_id: int
    opponent: Optional[str] = None
    date: str
    round: Optional[str] = None
    status: GameStatus

    class Config:
        from_attributes = True
