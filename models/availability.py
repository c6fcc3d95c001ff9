from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class PlayerAvailability(Base):
    """
    Whether a player can make a given game.

    Saving a game's availability writes one row per team player, so a game
    with no rows at all has never had availability set.
    """
    __tablename__ = "player_availability"

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    game = relationship("Game", back_populates="availability")
    player = relationship("Player", back_populates="availability")

    __table_args__ = (
        UniqueConstraint('game_id', 'player_id', name='unique_game_player_availability'),
    )
