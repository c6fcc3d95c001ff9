from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from db import Base


class RosterEntry(Base):
    __tablename__ = "rosters"

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    quarter = Column(Integer, nullable=False)  # 1-4
    position = Column(String(2), nullable=False)  # GS, GA, WA, C, WD, GD, GK
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)

    # Relationships
    game = relationship("Game", back_populates="roster_entries")
    player = relationship("Player", back_populates="roster_entries")

    # Constraints
    __table_args__ = (
        UniqueConstraint('game_id', 'quarter', 'position', name='unique_game_quarter_position'),
        UniqueConstraint('game_id', 'quarter', 'player_id', name='unique_game_quarter_player'),
        CheckConstraint('quarter BETWEEN 1 AND 4', name='roster_quarter_range'),
    )
