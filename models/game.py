from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base
import enum


class GameStatus(str, enum.Enum):
    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FORFEIT_WIN = "forfeit-win"
    FORFEIT_LOSS = "forfeit-loss"


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    opponent = Column(String, nullable=True)  # NULL for BYE rounds
    date = Column(String, nullable=False)  # ISO date e.g. "2024-05-18"
    round = Column(String, nullable=True)  # round number or "SF" / "GF"
    status = Column(Enum(GameStatus), default=GameStatus.UPCOMING, nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    team = relationship("Team", back_populates="games")
    roster_entries = relationship("RosterEntry", back_populates="game", cascade="all, delete-orphan", lazy='select')
    availability = relationship("PlayerAvailability", back_populates="game", cascade="all, delete-orphan", lazy='select')
